"""Domain exceptions for the SolarFlow application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class SolarFlowException(Exception):
    """Base exception for all SolarFlow application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SolarFlowException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ConfigurationException(SolarFlowException):
    """Raised when a stage, section or question fails configuration validation.

    Carries every validator message so the caller can show them all at once.
    """

    def __init__(self, entity_type: str, entity_id: str, errors: list[str]) -> None:
        """Initialize with the rejected entity and validator messages.

        Args:
            entity_type: 'stage', 'section' or 'question'.
            entity_id: Id of the candidate that was rejected.
            errors: Human-readable validator messages (non-empty).
        """
        super().__init__(
            f"Invalid {entity_type} configuration: {entity_id}",
            "CONFIGURATION_ERROR",
            {"entity_type": entity_type, "entity_id": entity_id, "errors": errors},
        )
        self.errors = errors


class EngineInputException(SolarFlowException):
    """Raised when an evaluation context is missing a required field."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Evaluation context is missing required field: {field}",
            "ENGINE_INPUT_ERROR",
            {"field": field},
        )


class InvalidSubmissionTransitionException(SolarFlowException):
    """Raised when a submission state change is not allowed (e.g. reviewing an empty answer)."""

    def __init__(self, question_id: str, from_state: str, to_state: str) -> None:
        """Initialize with the attempted transition.

        Args:
            question_id: Question the submission answers.
            from_state: Current submission state.
            to_state: Requested submission state.
        """
        super().__init__(
            f"Cannot move submission for question {question_id} from {from_state} to {to_state}",
            "INVALID_TRANSITION",
            {"question_id": question_id, "from_state": from_state, "to_state": to_state},
        )


class ReferentialIntegrityException(SolarFlowException):
    """Raised when deleting an item that other configuration still references."""

    def __init__(self, entity_type: str, entity_id: str, blocking_items: list[str]) -> None:
        """Initialize with the item being deleted and what references it.

        Args:
            entity_type: Type of the item being deleted.
            entity_id: Id of the item being deleted.
            blocking_items: Labels of the items that reference it.
        """
        super().__init__(
            f"Cannot delete {entity_type} {entity_id}: it is still referenced",
            "REFERENTIAL_INTEGRITY_ERROR",
            {
                "entity_type": entity_type,
                "entity_id": entity_id,
                "blocking_items": blocking_items,
            },
        )


class ResourceNotFoundException(SolarFlowException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'project', 'question').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StoreNotConfiguredException(SolarFlowException):
    """Raised when the configured document store is unavailable."""

    def __init__(self) -> None:
        super().__init__(
            message="The document store is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
