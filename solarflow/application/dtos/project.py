"""DTOs for project intake."""

from dataclasses import dataclass

from solarflow.application.dtos.evaluation import ProjectProgress
from solarflow.domain.entities import CustomerEntity, ProjectEntity


@dataclass(frozen=True)
class ProjectIntake:
    """A newly created project, its customer and the first evaluation of it."""

    project: ProjectEntity
    customer: CustomerEntity
    progress: ProjectProgress
