"""Domain value objects for the SolarFlow application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from solarflow.domain.enums import RuleOperator

# Closed set of literal types a rule may compare against.
RuleValue = str | int | float | bool | None


def _validate_rule_value(value: object) -> None:
    """Raise ValueError when value is outside the closed RuleValue set."""
    if value is not None and not isinstance(value, (str, int, float, bool)):
        raise ValueError(
            f"Rule value must be a string, number or boolean, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class ConditionalRule:
    """Visibility rule on a question: {field, operator, value}.

    field is a canonical path (project.system_size, customer.state) or
    another question's id.
    """

    field: str
    operator: RuleOperator
    value: RuleValue = None

    def __post_init__(self) -> None:
        if not self.field:
            raise ValueError("Conditional rule field must be a non-empty string")
        if not isinstance(self.operator, RuleOperator):
            object.__setattr__(self, "operator", RuleOperator(self.operator))
        _validate_rule_value(self.value)


@dataclass(frozen=True)
class SectionConditionalRule:
    """Visibility rule on a section, anchored on a single question's answer."""

    question_id: str
    operator: RuleOperator
    value: RuleValue = None

    def __post_init__(self) -> None:
        if not self.question_id:
            raise ValueError("Section rule question_id must be a non-empty string")
        if not isinstance(self.operator, RuleOperator):
            object.__setattr__(self, "operator", RuleOperator(self.operator))
        _validate_rule_value(self.value)

    def as_field_rule(self) -> ConditionalRule:
        """Return the equivalent question rule (field = question_id)."""
        return ConditionalRule(
            field=self.question_id, operator=self.operator, value=self.value
        )


@dataclass(frozen=True)
class FileReference:
    """Pointer to an uploaded file answering a file_upload question."""

    storage_path: str
    filename: str
    content_type: str
    size_bytes: int
    download_url: str = ""

    def __post_init__(self) -> None:
        if not self.storage_path:
            raise ValueError("File reference storage_path must be a non-empty string")
        if self.size_bytes < 0:
            raise ValueError("File reference size_bytes must not be negative")
