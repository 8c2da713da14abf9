# hospital_cms/schemas/doctor.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from hospital_cms.schemas.shared import RowOut, ProcedureInput, PatchInput, reject_null


class Doctor(RowOut):
    name: str
    specialization: str
    photo_url: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateDoctorInput(ProcedureInput):
    name: str
    specialization: str
    photo_url: Optional[str] = None
    is_active: bool = True


class UpdateDoctorInput(PatchInput):
    name: Optional[str] = None
    specialization: Optional[str] = None
    photo_url: Optional[str] = None  # null clears the photo
    is_active: Optional[bool] = None

    _not_null = field_validator("name", "specialization", "is_active")(reject_null)
