from fastapi import APIRouter, Body, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.doctor import doctors
from hospital_cms.schemas.shared import PaginationInput, GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.doctor import Doctor, CreateDoctorInput, UpdateDoctorInput

router = APIRouter(prefix="/rpc", tags=["doctors"])


@router.post("/createDoctor", response_model=Doctor)
async def create_doctor_route(payload: CreateDoctorInput, db: AsyncSession = Depends(get_db)):
    return await doctors.create(db, payload.model_dump())


@router.post("/getDoctors", response_model=List[Doctor])
async def get_doctors_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Active doctors, newest first"""
    return await doctors.list(db, pagination)


@router.post("/getDoctorById", response_model=Optional[Doctor])
async def get_doctor_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    return await doctors.get_by_id(db, payload.id)


@router.post("/updateDoctor", response_model=Doctor)
async def update_doctor_route(payload: UpdateDoctorInput, db: AsyncSession = Depends(get_db)):
    return await doctors.update(db, payload.id, payload.changes())


@router.post("/deleteDoctor", response_model=DeleteResult)
async def delete_doctor_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await doctors.delete(db, payload.id)
