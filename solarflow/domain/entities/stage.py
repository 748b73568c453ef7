"""Stage domain entity.

A stage is a top-level phase of the project lifecycle. It groups sections
and is gated only by the completion of other stages.
"""

from dataclasses import dataclass, field

from solarflow.domain.enums import ConfigStatus, StageType


@dataclass
class ActivationRules:
    """Stage activation rules: stages that must be complete first."""

    required_stage_ids: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.required_stage_ids


@dataclass
class StageEntity:
    """Domain entity for a workflow stage."""

    id: str
    name: str
    description: str = ""
    stage_type: StageType = StageType.TERMINAL
    status: ConfigStatus = ConfigStatus.ACTIVE
    section_ids: list[str] = field(default_factory=list)
    activation_rules: ActivationRules = field(default_factory=ActivationRules)
    order: int = 0
    # Cosmetic: controls installer-portal exposure, never evaluation.
    is_visible_to_installer: bool = True

    @property
    def required_stage_ids(self) -> list[str]:
        return self.activation_rules.required_stage_ids

    def owns_section(self, section_id: str) -> bool:
        return section_id in self.section_ids
