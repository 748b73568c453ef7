"""Project, customer and credit approval entities.

Conditional rules resolve canonical fields (project.<key>, customer.<key>)
against these records via attribute(); fields not modelled explicitly live
in the open attributes mapping.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

from solarflow.domain.enums import CreditApprovalStatus

_MISSING = object()


def _lookup(record: Any, key: str) -> Any:
    """Return a declared dataclass field, else the attributes entry, else _MISSING."""
    if key != "attributes" and key in {f.name for f in fields(record)}:
        return getattr(record, key)
    return record.attributes.get(key, _MISSING)


@dataclass
class CreditApprovalEntity:
    """Credit decision that makes a project eligible for the workflow."""

    id: str
    status: CreditApprovalStatus
    organization_id: str = ""
    approved_amount: float = 0
    customer_name: str = ""
    customer_email: str = ""
    customer_address: str = ""

    @property
    def is_approved(self) -> bool:
        return self.status == CreditApprovalStatus.APPROVED


@dataclass
class CustomerEntity:
    """Customer the project is installed for."""

    id: str
    name: str = ""
    address: str = ""
    organization_id: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    def attribute(self, key: str) -> Any:
        """Return the value for canonical key, or None when absent."""
        value = _lookup(self, key)
        return None if value is _MISSING else value


@dataclass
class ProjectEntity:
    """Installation project (lease).

    active_stages and current_stage_name cache the last evaluation; they are
    never read back as evaluation input.
    """

    id: str
    customer_id: str = ""
    credit_approval_id: str = ""
    organization_id: str = ""
    status: str = "in_progress"
    active_stages: list[str] = field(default_factory=list)
    current_stage_name: str | None = None
    created_at: datetime | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def attribute(self, key: str) -> Any:
        """Return the value for canonical key, or None when absent."""
        value = _lookup(self, key)
        return None if value is _MISSING else value
