"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from solarflow.api.v1.dependencies.
"""

from fastapi import APIRouter

from solarflow.api.v1.endpoints import (
    credit_approvals,
    evaluations,
    health,
    projects,
    questions,
    review_queue,
    sections,
    stages,
    submissions,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(stages.router, prefix="/stages", tags=["stages"])
api_router.include_router(sections.router, prefix="/sections", tags=["sections"])
api_router.include_router(questions.router, prefix="/questions", tags=["questions"])
api_router.include_router(
    credit_approvals.router, prefix="/credit-approvals", tags=["projects"]
)
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(submissions.router, prefix="/projects", tags=["submissions"])
api_router.include_router(review_queue.router, prefix="/submissions", tags=["submissions"])
api_router.include_router(evaluations.router, tags=["evaluation"])
