"""Domain entities and aggregates.

Pure domain models; no persistence concerns.
"""

from solarflow.domain.entities.project import (
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
)
from solarflow.domain.entities.question import QuestionEntity
from solarflow.domain.entities.section import SectionEntity
from solarflow.domain.entities.stage import ActivationRules, StageEntity
from solarflow.domain.entities.submission import SubmissionEntity, submission_id_for

__all__ = [
    "ActivationRules",
    "CreditApprovalEntity",
    "CustomerEntity",
    "ProjectEntity",
    "QuestionEntity",
    "SectionEntity",
    "StageEntity",
    "SubmissionEntity",
    "submission_id_for",
]
