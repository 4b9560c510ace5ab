from __future__ import annotations

import re

import pytest

from cliwarn.conditions import MISSING, Condition, ConditionKind, strict_equals


@pytest.mark.parametrize(
    "raw, kind",
    [
        (MISSING, ConditionKind.ALWAYS),
        (lambda value: True, ConditionKind.PREDICATE),
        (re.compile("x"), ConditionKind.PATTERN),
        (1447, ConditionKind.EQUALS),
        ("yes", ConditionKind.EQUALS),
        (None, ConditionKind.EQUALS),
    ],
)
def test_kind_follows_raw_shape(raw, kind) -> None:
    assert Condition.from_raw(raw).kind is kind


def test_from_raw_without_argument_is_always() -> None:
    condition = Condition.from_raw()
    assert condition.unconditional
    assert condition.matches("anything")
    assert condition.matches()


def test_existing_condition_passes_through() -> None:
    condition = Condition(ConditionKind.EQUALS, 3)
    assert Condition.from_raw(condition) is condition


def test_predicate_receives_context() -> None:
    calls = []
    condition = Condition.from_raw(lambda value: calls.append(value) or True)
    assert condition.matches("ctx") is True
    assert calls == ["ctx"]


def test_pattern_uses_search_semantics() -> None:
    condition = Condition.from_raw(re.compile(r"\d+\.\d+"))
    assert condition.matches("node v18.2 installed")
    assert not condition.matches("no version")
    assert not condition.matches(None)


def test_equals_is_strict() -> None:
    condition = Condition.from_raw(1447)
    assert condition.matches(1447)
    assert not condition.matches(14447)
    assert not condition.matches("1447")


@pytest.mark.parametrize(
    "expected, actual, result",
    [
        (1, 1, True),
        (1, 1.0, True),
        (1, True, False),
        (True, 1, False),
        (False, False, True),
        (0, False, False),
        ("a", "a", True),
        (None, None, True),
    ],
)
def test_strict_equals(expected, actual, result) -> None:
    assert strict_equals(expected, actual) is result
