# Este archivo define el modelo de estado de incidencia y la tabla fija
# que el servidor devuelve en /issue_statuses.json.

"""
Pydantic models for Redmine issue statuses.

Defines the status record, the listing document and the fixed status table.
"""
from typing import List, Tuple  # Type hints para listas y tuplas

from pydantic import BaseModel, ConfigDict, Field  # BaseModel: clase base para modelos, Field: validación de campos

from ..utils.validation import validate_status_table  # Validación de la tabla de estados


class IssueStatus(BaseModel):
    """A named status value an issue can hold."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Unique status identifier")
    name: str = Field(..., min_length=1, description="Human-readable status label")


class IssueStatusList(BaseModel):
    """Response document for GET /issue_statuses.json."""
    issue_statuses: List[IssueStatus] = Field(..., description="All statuses in declaration order")


ISSUE_STATUSES: Tuple[IssueStatus, ...] = tuple(validate_status_table((
    IssueStatus(id=1, name="Solved"),
    IssueStatus(id=2, name="Rejected"),
    IssueStatus(id=3, name="In Progress"),
    IssueStatus(id=4, name="Interrupted"),
)))


def issue_status_list() -> IssueStatusList:
    """Build the listing document from the fixed table."""
    return IssueStatusList(issue_statuses=list(ISSUE_STATUSES))
