# hospital_cms/schemas/news.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from hospital_cms.schemas.shared import RowOut, ProcedureInput, PatchInput, reject_null


class News(RowOut):
    title: str
    content: str
    image_url: Optional[str]
    is_published: bool
    created_at: datetime
    updated_at: datetime


class CreateNewsInput(ProcedureInput):
    title: str
    content: str
    image_url: Optional[str] = None
    is_published: bool = False


class UpdateNewsInput(PatchInput):
    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    is_published: Optional[bool] = None

    _not_null = field_validator("title", "content", "is_published")(reject_null)
