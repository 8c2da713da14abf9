# hospital_cms/schemas/about_us.py
from datetime import datetime

from hospital_cms.schemas.shared import RowOut, ProcedureInput


class AboutUs(RowOut):
    content: str
    created_at: datetime
    updated_at: datetime


class UpdateAboutUsInput(ProcedureInput):
    content: str
