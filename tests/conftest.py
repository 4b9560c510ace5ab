"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import List

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cliwarn import RegistrySettings, WarningRegistry  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class RecordingSink:
    """Sink that keeps every string written to it."""

    def __init__(self, tty: bool = False) -> None:
        self.messages: List[str] = []
        self.tty = tty

    def write(self, text: str) -> bool:
        self.messages.append(text)
        return True

    def isatty(self) -> bool:
        return self.tty


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell settings out of the tests."""
    for var in ("CLIWARN_COLOR", "CLIWARN_DISABLE", "CLIWARN_LOG_LEVEL", "CLIWARN_LOG_FORMAT", "LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def warn(sink: RecordingSink):
    """Registry loaded with the sample Python warnings file."""
    registry = WarningRegistry("test", sink=sink, settings=RegistrySettings())
    registry.read(FIXTURES_DIR / "sample_warnings.py")
    yield registry
    registry.release()
