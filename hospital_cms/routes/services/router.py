from fastapi import APIRouter, Body, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.service import services
from hospital_cms.schemas.shared import PaginationInput, GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.service import Service, CreateServiceInput, UpdateServiceInput

router = APIRouter(prefix="/rpc", tags=["services"])


@router.post("/createService", response_model=Service)
async def create_service_route(payload: CreateServiceInput, db: AsyncSession = Depends(get_db)):
    return await services.create(db, payload.model_dump())


@router.post("/getServices", response_model=List[Service])
async def get_services_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return await services.list(db, pagination)


@router.post("/getServiceById", response_model=Optional[Service])
async def get_service_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    """Returns null for inactive services as well as missing ones"""
    return await services.get_by_id(db, payload.id)


@router.post("/updateService", response_model=Service)
async def update_service_route(payload: UpdateServiceInput, db: AsyncSession = Depends(get_db)):
    return await services.update(db, payload.id, payload.changes())


@router.post("/deleteService", response_model=DeleteResult)
async def delete_service_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await services.delete(db, payload.id)
