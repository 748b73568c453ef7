"""Project use cases (intake, lookups)."""

from solarflow.application.use_cases.projects.project_service import ProjectService

__all__ = ["ProjectService"]
