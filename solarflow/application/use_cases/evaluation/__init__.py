"""Project evaluation use cases."""

from solarflow.application.use_cases.evaluation.evaluate_project import (
    EvaluateProjectUseCase,
)

__all__ = ["EvaluateProjectUseCase"]
