# hospital_cms/db/crud/menu_item.py
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import MenuItemModel

menu_items = CRUDResource(
    MenuItemModel,
    name="Menu item",
    order_by=(MenuItemModel.order_index.asc(), MenuItemModel.id.asc()),
    visibility_column=MenuItemModel.is_active,
)


async def get_menu_items(db: AsyncSession) -> List[MenuItemModel]:
    """Active navigation entries in display order. The menu is never paginated."""
    return await menu_items.list_all(db)
