from fastapi import APIRouter, Depends
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.about_us import get_about_us, update_about_us
from hospital_cms.schemas.about_us import AboutUs, UpdateAboutUsInput

router = APIRouter(prefix="/rpc", tags=["about us"])


@router.post("/getAboutUs", response_model=Optional[AboutUs])
async def get_about_us_route(db: AsyncSession = Depends(get_db)):
    return await get_about_us(db)


@router.post("/updateAboutUs", response_model=AboutUs)
async def update_about_us_route(payload: UpdateAboutUsInput, db: AsyncSession = Depends(get_db)):
    """Create the about-us text on first call, rewrite it afterwards"""
    return await update_about_us(db, payload.content)
