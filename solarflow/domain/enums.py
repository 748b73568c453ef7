"""Domain enumerations for the SolarFlow application.

Enums represent fixed sets of configuration and workflow values (question
types, rule operators, submission states).
"""

from enum import Enum


class QuestionType(str, Enum):
    """Input type of a question as shown to installers."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FILE_UPLOAD = "file_upload"
    SELECT = "select"
    DATE = "date"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid question types as strings."""
        return [t.value for t in cls]


class StorageType(str, Enum):
    """Canonical storage type of an answer, derived from QuestionType."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FILE = "file"
    DATE = "date"

    @classmethod
    def for_question_type(cls, question_type: QuestionType) -> "StorageType":
        """Return the storage type used for answers to question_type.

        Select and text answers are stored as strings.
        """
        return _STORAGE_BY_QUESTION_TYPE.get(question_type, cls.STRING)


_STORAGE_BY_QUESTION_TYPE: dict[QuestionType, StorageType] = {
    QuestionType.FILE_UPLOAD: StorageType.FILE,
    QuestionType.NUMBER: StorageType.NUMBER,
    QuestionType.BOOLEAN: StorageType.BOOLEAN,
    QuestionType.DATE: StorageType.DATE,
}


class RuleOperator(str, Enum):
    """Comparison operator of a conditional visibility rule."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    TRUE = "true"
    FALSE = "false"


class ConfigStatus(str, Enum):
    """Publication status shared by sections and stages.

    Draft items are excluded from evaluation entirely.
    """

    ACTIVE = "active"
    DRAFT = "draft"


class StageType(str, Enum):
    """Whether a stage is entered once (terminal) or may be revisited."""

    TERMINAL = "terminal"
    REENTRANT = "reentrant"


class SubmissionState(str, Enum):
    """Lifecycle state of a submission (empty -> submitted -> approved | rejected)."""

    EMPTY = "empty"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class ReviewDecision(str, Enum):
    """Admin decision on a submitted answer."""

    APPROVED = "approved"
    REJECTED = "rejected"


class CreditApprovalStatus(str, Enum):
    """Credit approval status; only approved projects are eligible."""

    APPROVED = "approved"
    UNAPPROVED = "unapproved"


class RequiredActionReason(str, Enum):
    """Why a required question still blocks its section."""

    MISSING = "missing"
    REJECTED = "rejected"
    AWAITING_APPROVAL = "awaiting_approval"
