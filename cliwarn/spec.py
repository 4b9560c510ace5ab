"""Warning definitions and normalization of raw spec values.

A raw spec may be:
    - a string: ``"Use --output instead"``
    - a list/tuple of lines: ``["line one", "line two"]``
    - a mapping: ``{"message": ..., "conditional"|"when": ..., "name": ...}``
    - an existing :class:`WarningSpec`

Specs are not validated here. A spec without a usable message is accepted
and only fails when the registry tries to format it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from cliwarn.conditions import MISSING, Condition
from cliwarn.exceptions import InvalidMessageError, SpecLoadError

__all__ = [
    "Message",
    "RawSpec",
    "WarningSpec",
    "message_lines",
    "normalize_spec",
    "specs_by_name",
]

Message = Union[str, Sequence[str]]
RawSpec = Union[str, Sequence[str], Mapping[str, Any], "WarningSpec"]


@dataclass(frozen=True)
class WarningSpec:
    """One registered warning.

    Frozen but not hashable: messages may be lists and ``extra`` is a dict.
    Specs compare by value.
    """

    name: str
    message: Optional[Message] = None
    condition: Condition = field(default_factory=Condition.from_raw)
    extra: Dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    @property
    def conditional(self) -> Any:
        """The raw conditional value, or MISSING for unconditional warnings."""
        if self.condition.unconditional:
            return MISSING
        return self.condition.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the mapping form accepted by :func:`normalize_spec`."""
        result: Dict[str, Any] = {"name": self.name, "message": self.message}
        if not self.condition.unconditional:
            result["conditional"] = self.condition.value
        result.update(self.extra)
        return result


def normalize_spec(name: str, raw: RawSpec) -> WarningSpec:
    """Turn a raw spec into a :class:`WarningSpec` registered under ``name``.

    Rules:
        - strings and lists/tuples become the message
        - ``when`` is used as the conditional if ``conditional`` is absent
        - a missing or empty ``name`` falls back to the registration key

    Args:
        name: Registration key
        raw: Raw spec value

    Returns:
        Normalized spec
    """
    if isinstance(raw, WarningSpec):
        return raw if raw.name else replace(raw, name=name)

    if isinstance(raw, (str, list, tuple)):
        return WarningSpec(name=name, message=raw)

    if not isinstance(raw, Mapping):
        # Not a spec shape we know; keep it as the message and let
        # formatting report the problem.
        return WarningSpec(name=name, message=raw)

    data = dict(raw)
    message = data.pop("message", None)
    spec_name = data.pop("name", None) or name

    conditional = data.pop("conditional", MISSING)
    when = data.pop("when", MISSING)
    if conditional is MISSING:
        conditional = when

    return WarningSpec(
        name=spec_name,
        message=message,
        condition=Condition.from_raw(conditional),
        extra=data,
    )


def specs_by_name(specs: Sequence[RawSpec]) -> Dict[str, RawSpec]:
    """Key a list of raw specs by their own ``name`` field.

    Later entries win when two specs share a name.

    Raises:
        SpecLoadError: If a spec has no name
    """
    result: Dict[str, RawSpec] = {}
    for index, spec in enumerate(specs):
        if isinstance(spec, WarningSpec):
            spec_name = spec.name
        elif isinstance(spec, Mapping):
            spec_name = spec.get("name")
        else:
            spec_name = None
        if not spec_name:
            raise SpecLoadError(f"Warning spec at index {index} has no 'name'")
        result[spec_name] = spec
    return result


def message_lines(message: Any, name: Optional[str] = None) -> List[str]:
    """Split a message into its output lines.

    Raises:
        InvalidMessageError: If the message is neither a string nor a list/tuple
    """
    if isinstance(message, str):
        return message.split("\n")
    if isinstance(message, (list, tuple)):
        return [str(line) for line in message]
    raise InvalidMessageError(
        "Warning message must be a string or a list of strings",
        name=name,
        message_type=type(message).__name__,
    )
