# hospital_cms/schemas/shared.py
from datetime import datetime
from typing import Annotated, Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class ProcedureInput(BaseModel):
    """Base for every procedure input: unknown keys are rejected."""
    model_config = ConfigDict(extra='forbid')


class PaginationInput(ProcedureInput):
    page: PositiveInt = 1
    limit: Annotated[int, Field(ge=1, le=100)] = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class GetByIdInput(ProcedureInput):
    id: PositiveInt


class DeleteByIdInput(ProcedureInput):
    id: PositiveInt


class DeleteResult(BaseModel):
    success: bool


class HealthStatus(BaseModel):
    status: Literal["ok"]
    timestamp: datetime


class RowOut(BaseModel):
    """Base for every persisted row returned by a procedure."""
    model_config = ConfigDict(from_attributes=True)

    id: int


class PatchInput(ProcedureInput):
    """
    Partial update payload.

    Only fields explicitly present in the request are applied: a field that is
    absent is left untouched, a nullable field sent as ``null`` is cleared.
    """

    id: PositiveInt

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"id"})


def reject_null(value):
    # for optional-but-not-nullable patch fields
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value
