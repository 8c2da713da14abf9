from fastapi import APIRouter, Body, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.news import news, get_latest_news, get_all_news_for_admin
from hospital_cms.schemas.shared import PaginationInput, GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.news import News, CreateNewsInput, UpdateNewsInput

router = APIRouter(prefix="/rpc", tags=["news"])


@router.post("/createNews", response_model=News)
async def create_news_route(payload: CreateNewsInput, db: AsyncSession = Depends(get_db)):
    return await news.create(db, payload.model_dump())


@router.post("/getNews", response_model=List[News])
async def get_news_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Published articles, newest first"""
    return await news.list(db, pagination)


@router.post("/getLatestNews", response_model=List[News])
async def get_latest_news_route(db: AsyncSession = Depends(get_db)):
    return await get_latest_news(db)


@router.post("/getNewsById", response_model=Optional[News])
async def get_news_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    return await news.get_by_id(db, payload.id)


@router.post("/getAllNewsForAdmin", response_model=List[News])
async def get_all_news_for_admin_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return await get_all_news_for_admin(db, pagination)


@router.post("/updateNews", response_model=News)
async def update_news_route(payload: UpdateNewsInput, db: AsyncSession = Depends(get_db)):
    return await news.update(db, payload.id, payload.changes())


@router.post("/deleteNews", response_model=DeleteResult)
async def delete_news_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await news.delete(db, payload.id)
