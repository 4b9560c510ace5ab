"""cliwarn: show terminal warnings about a topic at most once.

Usage:
    from cliwarn import WarningRegistry

    warn = WarningRegistry("mytool").read("./warnings.yaml")
    warn.about("old-flag")

The registry logs its decisions (registrations, suppressions, unmet
conditionals, writes) at DEBUG on the ``cliwarn`` logger. Call
``setup_logging(level=logging.DEBUG)`` to see them.
"""

from cliwarn.colors import ColorPair, colorize, supports_color
from cliwarn.conditions import Condition, ConditionKind
from cliwarn.config import ColorMode, RegistrySettings
from cliwarn.exceptions import (
    CliWarnError,
    ColorError,
    ConfigurationError,
    InvalidMessageError,
    RegistryReleasedError,
    SpecLoadError,
)
from cliwarn.loader import load_warnings
from cliwarn.logging_config import setup_logging
from cliwarn.registry import WarningRegistry, Warnings
from cliwarn.spec import WarningSpec, normalize_spec

__version__ = "1.0.0"

__all__ = [
    "ColorMode",
    "ColorPair",
    "CliWarnError",
    "ColorError",
    "Condition",
    "ConditionKind",
    "ConfigurationError",
    "InvalidMessageError",
    "RegistryReleasedError",
    "RegistrySettings",
    "SpecLoadError",
    "WarningRegistry",
    "WarningSpec",
    "Warnings",
    "colorize",
    "load_warnings",
    "normalize_spec",
    "setup_logging",
    "supports_color",
]
