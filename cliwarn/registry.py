"""Warning registry: print a warning about a topic at most once.

Example:
    from cliwarn import WarningRegistry

    warn = WarningRegistry("mytool")
    warn.read("./warnings.yaml")
    warn.register("old-flag", "--old-flag is deprecated, use --new-flag")

    if args.old_flag:
        warn.about("old-flag")          # printed once
    warn.about("legacy-node", node_version)  # printed if the conditional matches

Every topic moves from registered to consumed exactly once, on the first
dispatch whose conditional holds. Consumed topics are deleted from the
registry and afterwards behave like unknown ones. Suppressed topics never
print.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from cliwarn.colors import ColorPair, colorize
from cliwarn.config import RegistrySettings
from cliwarn.exceptions import RegistryReleasedError
from cliwarn.loader import load_warnings
from cliwarn.spec import RawSpec, WarningSpec, message_lines, normalize_spec, specs_by_name

logger = logging.getLogger(__name__)

__all__ = ["WarningRegistry", "Warnings"]

SpecSource = Union[str, "os.PathLike[str]", Mapping[str, RawSpec], Iterable[RawSpec]]


class WarningRegistry:
    """Registry of one-shot terminal warnings for a single tool.

    Args:
        namespace: Prefix printed before every line (may be empty)
        sink: Writable destination; defaults to ``sys.stderr``
        colors: ``ColorPair`` or ``{"prefix": ..., "line": ...}`` mapping
        prefix: Prefix color, used when ``colors`` is not given
        line: Message line color, used when ``colors`` is not given
        tty: Force color decoration on/off instead of checking the sink
        settings: Process-wide defaults; read from the environment when omitted
    """

    def __init__(
        self,
        namespace: str = "",
        *,
        sink: Optional[Any] = None,
        colors: Union[ColorPair, Mapping[str, str], None] = None,
        tty: Optional[bool] = None,
        settings: Optional[RegistrySettings] = None,
        prefix: Optional[str] = None,
        line: Optional[str] = None,
    ) -> None:
        settings = settings if settings is not None else RegistrySettings.from_env()

        self.namespace = namespace
        self.warnings: Dict[str, WarningSpec] = {}
        self.disabled: List[str] = list(settings.disabled)
        self.sink = sink if sink is not None else sys.stderr
        self.colors: Optional[ColorPair] = ColorPair.from_value(
            colors if colors is not None else {"prefix": prefix, "line": line}
        )
        self.color_enabled = bool(tty) if tty is not None else settings.resolve_color(self.sink)
        self._lock = threading.RLock()
        self._released = False

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self.warnings)} pending"
        return f"{self.__class__.__name__}({self.namespace!r}, {state})"

    @property
    def released(self) -> bool:
        return self._released

    def _ensure_active(self, operation: str) -> None:
        if self._released:
            raise RegistryReleasedError(
                f"Cannot {operation} on a released warning registry",
                namespace=self.namespace,
            )

    def register(self, name: str, spec: RawSpec) -> "WarningRegistry":
        """Add or replace the warning for ``name``.

        Args:
            name: Topic key
            spec: Message string, list of lines, ``{message, conditional|when}``
                mapping or ``WarningSpec``

        Returns:
            The registry, for chaining
        """
        self._ensure_active("register warnings")
        self.warnings[name] = normalize_spec(name, spec)
        logger.debug("Registered warning %s.%s", self.namespace, name)
        return self

    set = register

    def read(self, source: SpecSource) -> "WarningRegistry":
        """Register many warnings at once.

        Args:
            source: Mapping of name -> spec, list of specs carrying ``name``,
                or a path to a warnings file (see :mod:`cliwarn.loader`)

        Returns:
            The registry, for chaining
        """
        self._ensure_active("read warnings")

        if isinstance(source, (str, os.PathLike)):
            source = load_warnings(source)

        if not isinstance(source, Mapping):
            source = specs_by_name(list(source))

        for name, spec in source.items():
            self.register(name, spec)
        return self

    register_many = read

    def suppress(self, *names: Union[str, Iterable[str], Mapping[str, Any]]) -> "WarningRegistry":
        """Permanently block topics from being shown.

        Accepts names, lists of names, or mappings whose keys are names:

            warn.suppress("foo")
            warn.suppress("foo", "bar")
            warn.suppress(["foo", "bar"])
            warn.suppress({"foo": True, "bar": True})

        Returns:
            The registry, for chaining
        """
        self._ensure_active("suppress warnings")

        for item in names:
            if isinstance(item, str):
                self.disabled.append(item)
            else:
                # Iterating a mapping yields its keys
                self.disabled.extend(item)

        logger.debug("Suppressed warnings for %s: %s", self.namespace, self.disabled)
        return self

    disable = suppress

    def dispatch(self, key: str, context: Any = None) -> bool:
        """Show the warning for ``key`` if it is pending and its conditional holds.

        Args:
            key: Topic key
            context: Value checked against the warning's conditional

        Returns:
            True if the warning was written, False otherwise (unknown,
            suppressed, already shown, or conditional not met)
        """
        with self._lock:
            if key in self.disabled or key not in self.warnings:
                return False

            warning = self.warnings[key]
            if not warning.condition.matches(context):
                logger.debug("Conditional for %s.%s not met", self.namespace, key)
                return False

            # A predicate may have dispatched or replaced this topic itself
            if self.warnings.get(key) is not warning:
                return False

            text = self.format(warning.message, name=key)
            del self.warnings[key]
            sink = self.sink

        logger.debug("Writing warning %s.%s", self.namespace, key)
        sink.write(text)
        return True

    about = dispatch

    def format(self, message: Any, name: Optional[str] = None) -> str:
        """Render a message as the exact text written to the sink.

        One blank line is added before and after the message, every line is
        prefixed with ``"<namespace>: "``, and the result ends in a newline.

        Raises:
            InvalidMessageError: If the message is not a string or list of strings
        """
        lines = message_lines(message, name=name)
        lines = ["", *lines, ""]

        rendered = []
        for line in lines:
            prefix = f"{self.namespace}: "
            if self.color_enabled and self.colors is not None:
                prefix = colorize(prefix, self.colors.prefix)
                line = colorize(line, self.colors.line)
            rendered.append(prefix + line)

        return "\n".join(rendered) + "\n"

    def release(self) -> None:
        """Drop every reference the registry holds. Safe to call twice."""
        if self._released:
            return

        with self._lock:
            self.warnings = {}
            self.disabled = []
            self.sink = None
            self.colors = None
            self.color_enabled = False
            self._released = True
        logger.debug("Released warning registry %s", self.namespace)

    destroy = release


# Short alias
Warnings = WarningRegistry
