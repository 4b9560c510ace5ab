"""Process-wide defaults for warning registries.

Environment variables checked:
    CLIWARN_COLOR: Color mode (auto, always, never). Default: auto
    NO_COLOR: Any non-empty value disables colors unless CLIWARN_COLOR=always
    CLIWARN_DISABLE: Comma-separated topic names to suppress in every registry
    CLIWARN_LOG_LEVEL: Level for cliwarn's own diagnostic logging
    LOG_LEVEL: Fallback for CLIWARN_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from cliwarn.colors import supports_color
from cliwarn.exceptions import ConfigurationError

__all__ = [
    "ColorMode",
    "RegistrySettings",
    "get_color_mode_from_env",
    "get_disabled_from_env",
    "get_log_level_from_env",
]


class ColorMode(str, Enum):
    """When warning output gets ANSI colors."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def normalize(cls, raw: Optional[str]) -> "ColorMode":
        """Parse a mode name case-insensitively, ``None``/empty meaning AUTO.

        Raises:
            ConfigurationError: If the value is not a known mode
        """
        if raw is None or not raw.strip():
            return cls.AUTO
        aliases: Dict[str, str] = {
            "on": "always",
            "yes": "always",
            "true": "always",
            "1": "always",
            "off": "never",
            "no": "never",
            "false": "never",
            "0": "never",
        }
        value = raw.strip().lower()
        value = aliases.get(value, value)
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Invalid color mode '{raw}'. Valid options: {valid}",
                key="CLIWARN_COLOR",
                value=raw,
            )


def get_color_mode_from_env() -> ColorMode:
    """
    Get color mode from environment variables.

    ``CLIWARN_COLOR`` wins when set; otherwise a non-empty ``NO_COLOR``
    (https://no-color.org) switches colors off.

    Returns:
        ColorMode (default: AUTO)
    """
    raw = os.environ.get("CLIWARN_COLOR")
    if raw and raw.strip():
        return ColorMode.normalize(raw)
    if os.environ.get("NO_COLOR"):
        return ColorMode.NEVER
    return ColorMode.AUTO


def get_disabled_from_env() -> List[str]:
    """
    Get topic names disabled through ``CLIWARN_DISABLE``.

    Returns:
        Topic names in the order given, blanks dropped
    """
    raw = os.environ.get("CLIWARN_DISABLE", "")
    return [name.strip() for name in raw.split(",") if name.strip()]


def get_log_level_from_env() -> int:
    """
    Get log level from environment variable.

    Environment variables checked (in order):
    1. CLIWARN_LOG_LEVEL - cliwarn specific
    2. LOG_LEVEL - Generic

    Returns:
        Logging level (default: WARNING)
    """
    level_name = os.environ.get("CLIWARN_LOG_LEVEL") or os.environ.get("LOG_LEVEL", "WARNING")
    level_name = level_name.upper()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_map.get(level_name, logging.WARNING)


@dataclass
class RegistrySettings:
    """Defaults applied to every registry built without explicit options."""

    color_mode: ColorMode = ColorMode.AUTO
    disabled: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        """Collect settings from the current environment."""
        return cls(
            color_mode=get_color_mode_from_env(),
            disabled=get_disabled_from_env(),
        )

    def resolve_color(self, stream: Any) -> bool:
        """Decide whether to decorate output written to ``stream``.

        The stream is only asked about its TTY state in AUTO mode.
        """
        if self.color_mode is ColorMode.ALWAYS:
            return True
        if self.color_mode is ColorMode.NEVER:
            return False
        return supports_color(stream)
