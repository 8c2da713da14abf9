# hospital_cms/schemas/management_staff.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from hospital_cms.schemas.shared import RowOut, ProcedureInput, PatchInput, reject_null


class ManagementStaff(RowOut):
    name: str
    position: str
    photo_url: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateManagementStaffInput(ProcedureInput):
    name: str
    position: str
    photo_url: Optional[str] = None
    is_active: bool = True


class UpdateManagementStaffInput(PatchInput):
    name: Optional[str] = None
    position: Optional[str] = None
    photo_url: Optional[str] = None
    is_active: Optional[bool] = None

    _not_null = field_validator("name", "position", "is_active")(reject_null)
