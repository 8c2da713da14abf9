# hospital_cms/db/crud/news.py
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import NewsModel
from hospital_cms.schemas.shared import PaginationInput

logger = logging.getLogger(__name__)

LATEST_NEWS_LIMIT = 5

news = CRUDResource(
    NewsModel,
    name="News article",
    order_by=(NewsModel.created_at.desc(), NewsModel.id.desc()),
    visibility_column=NewsModel.is_published,
    delete_missing_raises=True,
)


async def get_latest_news(db: AsyncSession) -> List[NewsModel]:
    """Homepage summary: the most recent published articles."""
    logger.debug("CRUD: fetching latest published news")
    return await news.list(db, PaginationInput(page=1, limit=LATEST_NEWS_LIMIT))


async def get_all_news_for_admin(
    db: AsyncSession, pagination: Optional[PaginationInput] = None
) -> List[NewsModel]:
    """Published and unpublished articles alike, newest first."""
    return await news.list(db, pagination, visible_only=False)
