"""Domain value objects and shared value types."""

from solarflow.domain.value_objects.core import (
    ConditionalRule,
    FileReference,
    RuleValue,
    SectionConditionalRule,
)

__all__ = [
    "ConditionalRule",
    "FileReference",
    "RuleValue",
    "SectionConditionalRule",
]
