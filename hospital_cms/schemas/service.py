# hospital_cms/schemas/service.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from hospital_cms.schemas.shared import RowOut, ProcedureInput, PatchInput, reject_null


class Service(RowOut):
    title: str
    description: str
    image_url: Optional[str]
    facilities: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateServiceInput(ProcedureInput):
    title: str
    description: str
    image_url: Optional[str] = None
    facilities: List[str] = Field(default_factory=list)
    is_active: bool = True


class UpdateServiceInput(PatchInput):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    facilities: Optional[List[str]] = None
    is_active: Optional[bool] = None

    _not_null = field_validator("title", "description", "facilities", "is_active")(reject_null)
