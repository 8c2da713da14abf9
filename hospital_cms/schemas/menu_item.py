# hospital_cms/schemas/menu_item.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from hospital_cms.schemas.shared import RowOut, ProcedureInput, PatchInput, reject_null


class MenuItem(RowOut):
    title: str
    url: str
    order_index: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateMenuItemInput(ProcedureInput):
    title: str
    url: str
    order_index: int
    is_active: bool = True


class UpdateMenuItemInput(PatchInput):
    title: Optional[str] = None
    url: Optional[str] = None
    order_index: Optional[int] = None
    is_active: Optional[bool] = None

    _not_null = field_validator("title", "url", "order_index", "is_active")(reject_null)
