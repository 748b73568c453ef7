"""Document mapping: domain entities <-> plain dicts.

One mapping is shared by the Firestore and in-memory stores and by the JSON
evaluation-context codec, so a stored document, an API body and a debug
context all have the same shape. Missing keys fall back to entity defaults.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from solarflow.application.dtos.evaluation import EvaluationContext, EvaluationResult
from solarflow.domain.entities import (
    ActivationRules,
    CreditApprovalEntity,
    CustomerEntity,
    ProjectEntity,
    QuestionEntity,
    SectionEntity,
    StageEntity,
    SubmissionEntity,
    submission_id_for,
)
from solarflow.domain.enums import (
    ConfigStatus,
    CreditApprovalStatus,
    QuestionType,
    StageType,
    SubmissionState,
)
from solarflow.domain.exceptions import EngineInputException, ValidationException
from solarflow.domain.value_objects import (
    ConditionalRule,
    FileReference,
    SectionConditionalRule,
)
from solarflow.shared.utils.datetime import parse_iso_utc


def _rule_from_dict(data: dict[str, Any] | None) -> ConditionalRule | None:
    if not data:
        return None
    try:
        return ConditionalRule(
            field=data.get("field", ""),
            operator=data.get("operator", ""),
            value=data.get("value"),
        )
    except ValueError as e:
        raise ValidationException(f"Invalid conditional rule: {e}", field="conditional_rule") from e


def _section_rule_from_dict(data: dict[str, Any] | None) -> SectionConditionalRule | None:
    if not data:
        return None
    try:
        return SectionConditionalRule(
            question_id=data.get("question_id", ""),
            operator=data.get("operator", ""),
            value=data.get("value"),
        )
    except ValueError as e:
        raise ValidationException(
            f"Invalid section conditional rule: {e}", field="conditional_question_rule"
        ) from e


def question_from_dict(data: dict[str, Any]) -> QuestionEntity:
    return QuestionEntity(
        id=data["id"],
        label=data.get("label", ""),
        question_type=QuestionType(data.get("question_type", QuestionType.TEXT.value)),
        instructions=data.get("instructions", ""),
        mapped_field=data.get("mapped_field"),
        requires_approval=bool(data.get("requires_approval", False)),
        conditional_rule=_rule_from_dict(data.get("conditional_rule")),
        options=list(data.get("options") or []),
        allowed_file_types=list(data.get("allowed_file_types") or []),
        max_file_size_mb=data.get("max_file_size_mb"),
    )


def question_to_dict(question: QuestionEntity) -> dict[str, Any]:
    rule = question.conditional_rule
    return {
        "id": question.id,
        "label": question.label,
        "question_type": question.question_type.value,
        "data_type": question.data_type.value,
        "instructions": question.instructions,
        "mapped_field": question.mapped_field,
        "requires_approval": question.requires_approval,
        "conditional_rule": (
            {"field": rule.field, "operator": rule.operator.value, "value": rule.value}
            if rule
            else None
        ),
        "options": list(question.options),
        "allowed_file_types": list(question.allowed_file_types),
        "max_file_size_mb": question.max_file_size_mb,
    }


def section_from_dict(data: dict[str, Any]) -> SectionEntity:
    order = data.get("question_order")
    return SectionEntity(
        id=data["id"],
        name=data.get("name", ""),
        description=data.get("description", ""),
        required_question_ids=list(data.get("required_question_ids") or []),
        optional_question_ids=list(data.get("optional_question_ids") or []),
        question_order=list(order) if order is not None else None,
        depends_on_section_ids=list(data.get("depends_on_section_ids") or []),
        conditional_question_rule=_section_rule_from_dict(
            data.get("conditional_question_rule")
        ),
        status=ConfigStatus(data.get("status", ConfigStatus.ACTIVE.value)),
    )


def section_to_dict(section: SectionEntity) -> dict[str, Any]:
    rule = section.conditional_question_rule
    return {
        "id": section.id,
        "name": section.name,
        "description": section.description,
        "required_question_ids": list(section.required_question_ids),
        "optional_question_ids": list(section.optional_question_ids),
        "question_order": (
            list(section.question_order) if section.question_order is not None else None
        ),
        "depends_on_section_ids": list(section.depends_on_section_ids),
        "conditional_question_rule": (
            {
                "question_id": rule.question_id,
                "operator": rule.operator.value,
                "value": rule.value,
            }
            if rule
            else None
        ),
        "status": section.status.value,
    }


def stage_from_dict(data: dict[str, Any]) -> StageEntity:
    rules = data.get("activation_rules") or {}
    return StageEntity(
        id=data["id"],
        name=data.get("name", ""),
        description=data.get("description", ""),
        stage_type=StageType(data.get("stage_type", StageType.TERMINAL.value)),
        status=ConfigStatus(data.get("status", ConfigStatus.ACTIVE.value)),
        section_ids=list(data.get("section_ids") or []),
        activation_rules=ActivationRules(
            required_stage_ids=list(rules.get("required_stage_ids") or [])
        ),
        order=int(data.get("order") or 0),
        is_visible_to_installer=data.get("is_visible_to_installer", True) is not False,
    )


def stage_to_dict(stage: StageEntity) -> dict[str, Any]:
    return {
        "id": stage.id,
        "name": stage.name,
        "description": stage.description,
        "stage_type": stage.stage_type.value,
        "status": stage.status.value,
        "section_ids": list(stage.section_ids),
        "activation_rules": {"required_stage_ids": list(stage.required_stage_ids)},
        "order": stage.order,
        "is_visible_to_installer": stage.is_visible_to_installer,
    }


def _file_from_dict(data: dict[str, Any] | None) -> FileReference | None:
    if not data:
        return None
    return FileReference(
        storage_path=data.get("storage_path", ""),
        filename=data.get("filename", ""),
        content_type=data.get("content_type", ""),
        size_bytes=int(data.get("size_bytes") or 0),
        download_url=data.get("download_url", ""),
    )


def _file_to_dict(file: FileReference | None) -> dict[str, Any] | None:
    if file is None:
        return None
    return {
        "storage_path": file.storage_path,
        "filename": file.filename,
        "content_type": file.content_type,
        "size_bytes": file.size_bytes,
        "download_url": file.download_url,
    }


def submission_from_dict(data: dict[str, Any]) -> SubmissionEntity:
    project_id = data.get("project_id", "")
    question_id = data["question_id"]
    return SubmissionEntity(
        id=data.get("id") or submission_id_for(project_id, question_id),
        project_id=project_id,
        question_id=question_id,
        state=SubmissionState(data.get("state", SubmissionState.EMPTY.value)),
        value=data.get("value"),
        file=_file_from_dict(data.get("file")),
        submitted_by=data.get("submitted_by"),
        submitted_at=parse_iso_utc(data.get("submitted_at")),
        reviewed_by=data.get("reviewed_by"),
        reviewed_at=parse_iso_utc(data.get("reviewed_at")),
        feedback=data.get("feedback"),
    )


def submission_to_dict(submission: SubmissionEntity) -> dict[str, Any]:
    return {
        "id": submission.id,
        "project_id": submission.project_id,
        "question_id": submission.question_id,
        "state": submission.state.value,
        "value": submission.value,
        "file": _file_to_dict(submission.file),
        "submitted_by": submission.submitted_by,
        "submitted_at": submission.submitted_at,
        "reviewed_by": submission.reviewed_by,
        "reviewed_at": submission.reviewed_at,
        "feedback": submission.feedback,
    }


_PROJECT_FIELDS = (
    "id",
    "customer_id",
    "credit_approval_id",
    "organization_id",
    "status",
    "active_stages",
    "current_stage_name",
    "created_at",
)
_CUSTOMER_FIELDS = ("id", "name", "address", "organization_id")


def project_from_dict(data: dict[str, Any]) -> ProjectEntity:
    extra = {k: v for k, v in data.items() if k not in _PROJECT_FIELDS and k != "attributes"}
    return ProjectEntity(
        id=data["id"],
        customer_id=data.get("customer_id", ""),
        credit_approval_id=data.get("credit_approval_id", ""),
        organization_id=data.get("organization_id", ""),
        status=data.get("status", "in_progress"),
        active_stages=list(data.get("active_stages") or []),
        current_stage_name=data.get("current_stage_name"),
        created_at=parse_iso_utc(data.get("created_at")),
        attributes={**extra, **(data.get("attributes") or {})},
    )


def project_to_dict(project: ProjectEntity) -> dict[str, Any]:
    return {
        "id": project.id,
        "customer_id": project.customer_id,
        "credit_approval_id": project.credit_approval_id,
        "organization_id": project.organization_id,
        "status": project.status,
        "active_stages": list(project.active_stages),
        "current_stage_name": project.current_stage_name,
        "created_at": project.created_at,
        "attributes": dict(project.attributes),
    }


def customer_from_dict(data: dict[str, Any]) -> CustomerEntity:
    extra = {k: v for k, v in data.items() if k not in _CUSTOMER_FIELDS and k != "attributes"}
    return CustomerEntity(
        id=data["id"],
        name=data.get("name", ""),
        address=data.get("address", ""),
        organization_id=data.get("organization_id", ""),
        attributes={**extra, **(data.get("attributes") or {})},
    )


def customer_to_dict(customer: CustomerEntity) -> dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "address": customer.address,
        "organization_id": customer.organization_id,
        "attributes": dict(customer.attributes),
    }


def credit_approval_from_dict(data: dict[str, Any]) -> CreditApprovalEntity:
    return CreditApprovalEntity(
        id=data.get("id", ""),
        status=CreditApprovalStatus(data.get("status", CreditApprovalStatus.UNAPPROVED.value)),
        organization_id=data.get("organization_id", ""),
        approved_amount=data.get("approved_amount") or 0,
        customer_name=data.get("customer_name", ""),
        customer_email=data.get("customer_email", ""),
        customer_address=data.get("customer_address", ""),
    )


def credit_approval_to_dict(approval: CreditApprovalEntity) -> dict[str, Any]:
    return {
        "id": approval.id,
        "status": approval.status.value,
        "organization_id": approval.organization_id,
        "approved_amount": approval.approved_amount,
        "customer_name": approval.customer_name,
        "customer_email": approval.customer_email,
        "customer_address": approval.customer_address,
    }


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _context_record(data: dict[str, Any], key: str) -> dict[str, Any]:
    record = data.get(key)
    if not record:
        raise EngineInputException(key)
    if not isinstance(record, dict):
        raise EngineInputException(key, f"Evaluation context field must be an object: {key}")
    return record


def _context_collection(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    if key not in data:
        return []
    items = data[key]
    if items is None:
        raise EngineInputException(key, f"Evaluation context collection is missing: {key}")
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise EngineInputException(
            key, f"Evaluation context collection must be a list of objects: {key}"
        )
    return items


def context_from_dict(data: dict[str, Any]) -> EvaluationContext:
    """Build an EvaluationContext from its JSON document.

    An absent collection key means an empty collection; an explicit null does not.

    Raises:
        EngineInputException: If the document is not an object, project, customer or
            credit_approval is missing or not an object, or a collection is null or
            not a list of objects.
        ValidationException: If a value does not fit its field (e.g. unknown enum).
    """
    if not isinstance(data, dict):
        raise EngineInputException("context", "Evaluation context must be an object")
    records = {
        key: _context_record(data, key) for key in ("project", "customer", "credit_approval")
    }
    collections = {
        key: _context_collection(data, key)
        for key in ("stages", "sections", "questions", "submissions")
    }
    try:
        project = project_from_dict(records["project"])
        submissions = [
            submission_from_dict({"project_id": project.id, **raw})
            for raw in collections["submissions"]
        ]
        return EvaluationContext(
            project=project,
            customer=customer_from_dict(records["customer"]),
            credit_approval=credit_approval_from_dict(records["credit_approval"]),
            stages=tuple(stage_from_dict(s) for s in collections["stages"]),
            sections=tuple(section_from_dict(s) for s in collections["sections"]),
            questions=tuple(question_from_dict(q) for q in collections["questions"]),
            submissions=tuple(submissions),
        )
    except KeyError as e:
        raise EngineInputException(str(e.args[0])) from e
    except (AttributeError, TypeError, ValueError) as e:
        raise ValidationException(f"Invalid evaluation context: {e}") from e


def context_to_dict(context: EvaluationContext) -> dict[str, Any]:
    """Return the JSON document for an EvaluationContext (inverse of context_from_dict)."""
    return _jsonable(
        {
            "project": project_to_dict(context.project),
            "customer": customer_to_dict(context.customer),
            "credit_approval": credit_approval_to_dict(context.credit_approval),
            "stages": [stage_to_dict(s) for s in context.stages],
            "sections": [section_to_dict(s) for s in context.sections],
            "questions": [question_to_dict(q) for q in context.questions],
            "submissions": [submission_to_dict(s) for s in context.submissions],
        }
    )


def result_to_dict(result: EvaluationResult) -> dict[str, Any]:
    return result.to_dict()
