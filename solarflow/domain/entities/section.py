"""Section domain entity: a named group of questions gated by other sections."""

from dataclasses import dataclass, field

from solarflow.domain.enums import ConfigStatus
from solarflow.domain.value_objects import SectionConditionalRule


@dataclass
class SectionEntity:
    """Domain entity for a section of questions."""

    id: str
    name: str
    description: str = ""
    required_question_ids: list[str] = field(default_factory=list)
    optional_question_ids: list[str] = field(default_factory=list)
    question_order: list[str] | None = None
    depends_on_section_ids: list[str] = field(default_factory=list)
    conditional_question_rule: SectionConditionalRule | None = None
    status: ConfigStatus = ConfigStatus.ACTIVE

    @property
    def is_draft(self) -> bool:
        return self.status == ConfigStatus.DRAFT

    def display_question_ids(self) -> list[str]:
        """Return question ids in display order without duplicates.

        Uses question_order when configured, otherwise required then optional.
        """
        source = self.question_order or [
            *self.required_question_ids,
            *self.optional_question_ids,
        ]
        return list(dict.fromkeys(source))

    def contains_question(self, question_id: str) -> bool:
        return (
            question_id in self.required_question_ids
            or question_id in self.optional_question_ids
        )

    def without_question(self, question_id: str) -> "SectionEntity":
        """Return a copy with question_id removed from every id list."""
        return SectionEntity(
            id=self.id,
            name=self.name,
            description=self.description,
            required_question_ids=[q for q in self.required_question_ids if q != question_id],
            optional_question_ids=[q for q in self.optional_question_ids if q != question_id],
            question_order=(
                [q for q in self.question_order if q != question_id]
                if self.question_order is not None
                else None
            ),
            depends_on_section_ids=list(self.depends_on_section_ids),
            conditional_question_rule=self.conditional_question_rule,
            status=self.status,
        )
