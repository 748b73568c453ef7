"""DTOs for submission use cases."""

from dataclasses import dataclass

from solarflow.application.dtos.evaluation import ProjectProgress
from solarflow.domain.entities import SubmissionEntity


@dataclass(frozen=True)
class SubmissionOutcome:
    """Stored submission plus the project state re-derived after the write."""

    submission: SubmissionEntity
    progress: ProjectProgress
