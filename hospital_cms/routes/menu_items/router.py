from fastapi import APIRouter, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.menu_item import menu_items, get_menu_items
from hospital_cms.schemas.shared import GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.menu_item import MenuItem, CreateMenuItemInput, UpdateMenuItemInput

router = APIRouter(prefix="/rpc", tags=["menu items"])


@router.post("/createMenuItem", response_model=MenuItem)
async def create_menu_item_route(payload: CreateMenuItemInput, db: AsyncSession = Depends(get_db)):
    return await menu_items.create(db, payload.model_dump())


@router.post("/getMenuItems", response_model=List[MenuItem])
async def get_menu_items_route(db: AsyncSession = Depends(get_db)):
    """Active menu entries ordered by order_index"""
    return await get_menu_items(db)


@router.post("/getMenuItemById", response_model=Optional[MenuItem])
async def get_menu_item_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    return await menu_items.get_by_id(db, payload.id)


@router.post("/updateMenuItem", response_model=MenuItem)
async def update_menu_item_route(payload: UpdateMenuItemInput, db: AsyncSession = Depends(get_db)):
    return await menu_items.update(db, payload.id, payload.changes())


@router.post("/deleteMenuItem", response_model=DeleteResult)
async def delete_menu_item_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await menu_items.delete(db, payload.id)
