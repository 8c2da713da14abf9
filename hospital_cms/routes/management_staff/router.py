from fastapi import APIRouter, Body, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.management_staff import management_staff
from hospital_cms.schemas.shared import PaginationInput, GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.management_staff import (
    ManagementStaff,
    CreateManagementStaffInput,
    UpdateManagementStaffInput,
)

router = APIRouter(prefix="/rpc", tags=["management staff"])


@router.post("/createManagementStaff", response_model=ManagementStaff)
async def create_management_staff_route(
    payload: CreateManagementStaffInput, db: AsyncSession = Depends(get_db)
):
    return await management_staff.create(db, payload.model_dump())


@router.post("/getManagementStaff", response_model=List[ManagementStaff])
async def get_management_staff_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return await management_staff.list(db, pagination)


@router.post("/getManagementStaffById", response_model=Optional[ManagementStaff])
async def get_management_staff_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    return await management_staff.get_by_id(db, payload.id)


@router.post("/updateManagementStaff", response_model=ManagementStaff)
async def update_management_staff_route(
    payload: UpdateManagementStaffInput, db: AsyncSession = Depends(get_db)
):
    return await management_staff.update(db, payload.id, payload.changes())


@router.post("/deleteManagementStaff", response_model=DeleteResult)
async def delete_management_staff_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await management_staff.delete(db, payload.id)
