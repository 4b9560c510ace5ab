"""Terminal color decoration for warning output.

Colors are given as ``#RRGGBB``/``#RGB`` hex strings (rendered as 24-bit
ANSI foreground colors) or as one of the basic ANSI color names.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from cliwarn.exceptions import ColorError

__all__ = [
    "ANSI_COLORS",
    "DEFAULT_PREFIX_COLOR",
    "DEFAULT_LINE_COLOR",
    "ColorPair",
    "colorize",
    "hex_to_rgb",
    "supports_color",
]

DEFAULT_PREFIX_COLOR = "#EF7D43"  # Orange
DEFAULT_LINE_COLOR = "#FFFFFF"  # White

# ANSI color codes
ANSI_COLORS: Dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}
RESET = "\033[39m"

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class ColorPair:
    """Colors for the namespace prefix and the message text of a line."""

    prefix: str = DEFAULT_PREFIX_COLOR
    line: str = DEFAULT_LINE_COLOR

    @classmethod
    def from_value(cls, value: Union["ColorPair", Mapping[str, Any], None]) -> "ColorPair":
        """Build a pair from an existing pair, a ``{prefix, line}`` mapping or None."""
        if value is None:
            return cls()
        if isinstance(value, ColorPair):
            return value
        return cls(
            prefix=value.get("prefix") or DEFAULT_PREFIX_COLOR,
            line=value.get("line") or DEFAULT_LINE_COLOR,
        )


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert ``#RRGGBB`` or ``#RGB`` to an RGB tuple.

    Raises:
        ColorError: If the value is not a hex color
    """
    match = _HEX_PATTERN.match(color.strip())
    if not match:
        raise ColorError(f"Invalid hex color '{color}'", color=color)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _start_code(color: str) -> str:
    name = color.strip().lower()
    if name in ANSI_COLORS:
        return ANSI_COLORS[name]
    r, g, b = hex_to_rgb(color)
    return f"\033[38;2;{r};{g};{b}m"


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in the ANSI escape codes for ``color``.

    Args:
        text: Text to decorate
        color: Hex color (``#EF7D43``) or basic color name (``yellow``)

    Returns:
        Decorated text, reset to the default foreground afterwards

    Raises:
        ColorError: If the color is not recognized
    """
    if not isinstance(color, str):
        raise ColorError(f"Color must be a string, got {type(color).__name__}", color=repr(color))
    return f"{_start_code(color)}{text}{RESET}"


def supports_color(stream: Optional[Any]) -> bool:
    """Return True when ``stream`` is attached to a terminal.

    Streams without an ``isatty`` method (or whose check fails because the
    stream is closed) are treated as plain text destinations.
    """
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed file objects raise ValueError on isatty()
        return False
