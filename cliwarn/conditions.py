"""Conditional guards for warning topics.

A condition is built once, when the warning is registered, from the shape
of the raw ``conditional``/``when`` value:

    missing            -> ALWAYS     fires on the first dispatch attempt
    callable           -> PREDICATE  truthiness of ``fn(context)``
    compiled regex     -> PATTERN    ``regex.search(str(context))``
    anything else      -> EQUALS     strict equality with the context
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["MISSING", "ConditionKind", "Condition", "strict_equals"]


class _Missing:
    """Marker for an absent ``conditional`` field (``None`` is a valid value)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ConditionKind(str, Enum):
    ALWAYS = "always"
    PREDICATE = "predicate"
    PATTERN = "pattern"
    EQUALS = "equals"


def strict_equals(expected: Any, actual: Any) -> bool:
    """Equality that does not let booleans stand in for numbers.

    ``1 == True`` holds in Python; for warning conditionals it must not.
    """
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    return bool(expected == actual)


@dataclass(frozen=True)
class Condition:
    """Tagged conditional: a kind plus the value it was built from."""

    kind: ConditionKind
    value: Any = None

    @classmethod
    def from_raw(cls, raw: Any = MISSING) -> "Condition":
        """Pick the condition kind from the shape of ``raw``."""
        if raw is MISSING:
            return cls(ConditionKind.ALWAYS)
        if isinstance(raw, Condition):
            return raw
        if isinstance(raw, re.Pattern):
            return cls(ConditionKind.PATTERN, raw)
        if callable(raw):
            return cls(ConditionKind.PREDICATE, raw)
        return cls(ConditionKind.EQUALS, raw)

    @property
    def unconditional(self) -> bool:
        return self.kind is ConditionKind.ALWAYS

    def matches(self, context: Any = None) -> bool:
        """Evaluate the condition against the value passed to dispatch."""
        if self.kind is ConditionKind.ALWAYS:
            return True
        if self.kind is ConditionKind.PREDICATE:
            return bool(self.value(context))
        if self.kind is ConditionKind.PATTERN:
            if context is None:
                return False
            text = context if isinstance(context, str) else str(context)
            return self.value.search(text) is not None
        if self.kind is ConditionKind.EQUALS:
            return strict_equals(self.value, context)
        raise ValueError(f"Unknown condition kind: {self.kind!r}")
