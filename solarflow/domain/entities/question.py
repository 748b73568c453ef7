"""Question domain entity.

A question is one field of data collection, optionally conditionally
visible and optionally gated on admin approval.
"""

from dataclasses import dataclass, field
from typing import Any

from solarflow.domain.enums import QuestionType, StorageType
from solarflow.domain.value_objects import ConditionalRule


@dataclass
class QuestionEntity:
    """Domain entity for a configured question."""

    id: str
    label: str
    question_type: QuestionType = QuestionType.TEXT
    instructions: str = ""
    mapped_field: str | None = None
    requires_approval: bool = False
    conditional_rule: ConditionalRule | None = None
    options: list[dict[str, Any]] = field(default_factory=list)
    allowed_file_types: list[str] = field(default_factory=list)
    max_file_size_mb: float | None = None

    @property
    def data_type(self) -> StorageType:
        """Canonical storage type derived from question_type."""
        return StorageType.for_question_type(self.question_type)

    def references_question(self, question_id: str) -> bool:
        """Return whether this question's visibility rule reads question_id."""
        return self.conditional_rule is not None and self.conditional_rule.field == question_id
