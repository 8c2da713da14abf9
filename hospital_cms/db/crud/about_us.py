# hospital_cms/db/crud/about_us.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.models import AboutUsModel
from hospital_cms.db.models.timestamps import utcnow

logger = logging.getLogger(__name__)


async def get_about_us(db: AsyncSession) -> Optional[AboutUsModel]:
    """
    Returns the about-us row, or None before it has ever been written.

    The table is a singleton in practice; if duplicates were inserted by hand the
    oldest one (lowest id) wins.
    """
    stmt = select(AboutUsModel).order_by(AboutUsModel.id.asc()).limit(1)
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        logger.error(f"CRUD: error fetching about us content: {e}", exc_info=True)
        raise
    return result.scalars().first()


async def update_about_us(db: AsyncSession, content: str) -> AboutUsModel:
    """
    Upsert the about-us content.

    Creates the row when none exists; otherwise rewrites ``content`` and
    ``updated_at`` on the existing row, keeping its id and created_at.
    """
    about = await get_about_us(db)
    now = utcnow()

    if about is None:
        logger.info("CRUD: no about us row yet, creating it")
        about = AboutUsModel(content=content, created_at=now, updated_at=now)
        db.add(about)
    else:
        logger.debug(f"CRUD: updating about us id={about.id}")
        about.content = content
        about.updated_at = now

    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"CRUD: database error while saving about us: {e}", exc_info=True)
        raise

    await db.refresh(about)
    logger.info(f"CRUD: about us saved (id={about.id})")
    return about
