"""Submission use cases (answer, review)."""

from solarflow.application.use_cases.submissions.submission_service import (
    SubmissionService,
)

__all__ = ["SubmissionService"]
