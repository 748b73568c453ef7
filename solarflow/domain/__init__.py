"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from solarflow.domain.entities import (
    ActivationRules,
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
)
from solarflow.domain.enums import (
    ConfigStatus,
    CreditApprovalStatus,
    QuestionType,
    RequiredActionReason,
    ReviewDecision,
    RuleOperator,
    StageType,
    StorageType,
    SubmissionState,
)
from solarflow.domain.exceptions import (
    ConfigurationException,
    EngineInputException,
    InvalidSubmissionTransitionException,
    ReferentialIntegrityException,
    ResourceNotFoundException,
    SolarFlowException,
    ValidationException,
)
from solarflow.domain.value_objects import (
    ConditionalRule,
    FileReference,
    SectionConditionalRule,
)

__all__ = [
    # Entities
    "ActivationRules",
    "CreditApprovalEntity",
    "CustomerEntity",
    "ProjectEntity",
    "QuestionEntity",
    "SectionEntity",
    "StageEntity",
    "SubmissionEntity",
    # Enums
    "ConfigStatus",
    "CreditApprovalStatus",
    "QuestionType",
    "RequiredActionReason",
    "ReviewDecision",
    "RuleOperator",
    "StageType",
    "StorageType",
    "SubmissionState",
    # Exceptions
    "ConfigurationException",
    "EngineInputException",
    "InvalidSubmissionTransitionException",
    "ReferentialIntegrityException",
    "ResourceNotFoundException",
    "SolarFlowException",
    "ValidationException",
    # Value objects
    "ConditionalRule",
    "FileReference",
    "SectionConditionalRule",
]
