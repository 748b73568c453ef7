"""Canonical value resolver and conditional rule evaluation.

Rules compare a resolved canonical field against a literal. Resolution is
limited to project.<key> and customer.<key>; every other path (including
submission.* and bare question ids) resolves to UNRESOLVED, which never
equals anything and never orders.
"""

from __future__ import annotations

import math
from typing import Any

from solarflow.domain.entities import CustomerEntity, ProjectEntity
from solarflow.domain.enums import RuleOperator
from solarflow.domain.value_objects import ConditionalRule

PROJECT_PREFIX = "project."
CUSTOMER_PREFIX = "customer."
SUBMISSION_PREFIX = "submission."
CANONICAL_PREFIXES = (PROJECT_PREFIX, CUSTOMER_PREFIX, SUBMISSION_PREFIX)


class _Unresolved:
    """Sentinel for canonical fields that cannot be resolved."""

    _instance: _Unresolved | None = None

    def __new__(cls) -> _Unresolved:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Any = _Unresolved()


def is_canonical_path(field: str) -> bool:
    """Return whether field is a dotted canonical path rather than a question id."""
    return field.startswith(CANONICAL_PREFIXES)


def _to_number(value: Any) -> int | float | None:
    """Coerce value to a number the way loose comparison does, or None if it is not numeric.

    Integers stay integers so arbitrarily large values compare exactly.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """Loose equality shared by equals/not_equals.

    Numbers and numeric strings compare by value ("5" == 5), booleans compare
    as 0/1 against numbers, None only equals None, UNRESOLVED equals nothing.
    Two strings compare exactly.
    """
    if left is UNRESOLVED or right is UNRESOLVED:
        return False
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if isinstance(left, bool) and isinstance(right, bool):
        return left == right
    left_num = _to_number(left)
    right_num = _to_number(right)
    if left_num is None or right_num is None:
        return False
    return left_num == right_num


def _compare(left: Any, right: Any) -> int | None:
    """Return -1/0/1 for numeric ordering, or None when either side is not numeric."""
    if left is UNRESOLVED or left is None or right is None:
        return None
    left_num = _to_number(left)
    right_num = _to_number(right)
    if left_num is None or right_num is None:
        return None
    return (left_num > right_num) - (left_num < right_num)


class CanonicalValueResolver:
    """Resolves dotted canonical field paths against one project and its customer."""

    def __init__(self, project: ProjectEntity, customer: CustomerEntity) -> None:
        self._project = project
        self._customer = customer

    def resolve(self, field: str) -> Any:
        """Return the value for field, None for a missing key, or UNRESOLVED."""
        if field.startswith(PROJECT_PREFIX):
            return self._project.attribute(field[len(PROJECT_PREFIX):])
        if field.startswith(CUSTOMER_PREFIX):
            return self._customer.attribute(field[len(CUSTOMER_PREFIX):])
        return UNRESOLVED

    def check(self, rule: ConditionalRule | None) -> bool:
        """Evaluate rule; an absent rule always passes."""
        if rule is None:
            return True
        return evaluate_operator(rule.operator, self.resolve(rule.field), rule.value)


def evaluate_operator(operator: RuleOperator, actual: Any, expected: Any) -> bool:
    """Apply operator to a resolved value and the rule literal."""
    if operator == RuleOperator.EQUALS:
        return loose_equals(actual, expected)
    if operator == RuleOperator.NOT_EQUALS:
        return not loose_equals(actual, expected)
    if operator == RuleOperator.GREATER_THAN:
        return _compare(actual, expected) == 1
    if operator == RuleOperator.LESS_THAN:
        return _compare(actual, expected) == -1
    if operator == RuleOperator.TRUE:
        return actual is True
    if operator == RuleOperator.FALSE:
        return actual is False
    return False
