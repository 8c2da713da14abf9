import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from sqlalchemy import select, delete, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.core.errors import NotFoundError
from hospital_cms.db.base import Base
from hospital_cms.db.models.timestamps import utcnow
from hospital_cms.schemas.shared import PaginationInput

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CRUDResource(Generic[ModelT]):
    """
    Create / List / GetById / Update / Delete over one flat table.

    Args:
        model: the SQLAlchemy model class
        name: human readable resource name used in log lines and NotFound messages
        order_by: canonical listing order (sequence of column expressions)
        visibility_column: boolean column a public listing filters on (is_active / is_published)
        get_by_id_visible_only: apply the visibility filter to GetById as well
        delete_missing_raises: raise NotFoundError on a missing id instead of returning success=False
        has_updated_at: whether the table carries an updated_at column
    """

    def __init__(
        self,
        model: type[ModelT],
        name: str,
        order_by: Sequence[Any],
        visibility_column: Optional[Any] = None,
        get_by_id_visible_only: bool = False,
        delete_missing_raises: bool = False,
        has_updated_at: bool = True,
    ):
        self.model = model
        self.name = name
        self.order_by = tuple(order_by)
        self.visibility_column = visibility_column
        self.get_by_id_visible_only = get_by_id_visible_only
        self.delete_missing_raises = delete_missing_raises
        self.has_updated_at = has_updated_at

    async def create(self, db: AsyncSession, fields: Dict[str, Any]) -> ModelT:
        logger.debug(f"CRUD: creating {self.name} with fields {sorted(fields)}")
        now = utcnow()
        row = self.model(**fields, created_at=now)
        if self.has_updated_at:
            row.updated_at = now

        db.add(row)
        await self._commit(db, f"creating {self.name}")
        await db.refresh(row)  # generated id and stored timestamps

        logger.info(f"CRUD: created {self.name} id={row.id}")
        return row

    async def list(
        self,
        db: AsyncSession,
        pagination: Optional[PaginationInput] = None,
        visible_only: bool = True,
    ) -> List[ModelT]:
        pagination = pagination or PaginationInput()
        logger.debug(
            f"CRUD: listing {self.name} page={pagination.page} limit={pagination.limit} "
            f"visible_only={visible_only}"
        )

        query = self._visible(select(self.model), visible_only)
        query = query.order_by(*self.order_by).offset(pagination.offset).limit(pagination.limit)

        rows = await self._scalars(db, query)
        logger.info(f"CRUD: found {len(rows)} {self.name} rows")
        return rows

    async def list_all(self, db: AsyncSession, visible_only: bool = True) -> List[ModelT]:
        """Unpaginated listing, for small tables like the navigation menu."""
        query = self._visible(select(self.model), visible_only).order_by(*self.order_by)
        rows = await self._scalars(db, query)
        logger.info(f"CRUD: found {len(rows)} {self.name} rows")
        return rows

    async def get_by_id(self, db: AsyncSession, row_id: int) -> Optional[ModelT]:
        query = select(self.model).where(self.model.id == row_id)
        if self.get_by_id_visible_only:
            query = self._visible(query, True)

        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"CRUD: error fetching {self.name} id={row_id}: {e}", exc_info=True)
            raise

        row = result.scalar_one_or_none()
        if row is None:
            logger.info(f"CRUD: no {self.name} found with id={row_id}")
        return row

    async def update(self, db: AsyncSession, row_id: int, changes: Dict[str, Any]) -> ModelT:
        """
        Apply a patch. Keys absent from ``changes`` are left untouched; a key
        mapped to None is written as NULL.
        """
        logger.debug(f"CRUD: updating {self.name} id={row_id} fields {sorted(changes)}")

        row = await self._get_unfiltered(db, row_id)
        if row is None:
            logger.warning(f"CRUD: update of missing {self.name} id={row_id}")
            raise NotFoundError(self.name, row_id)

        for field, value in changes.items():
            setattr(row, field, value)
        if self.has_updated_at:
            row.updated_at = utcnow()

        await self._commit(db, f"updating {self.name} id={row_id}")
        await db.refresh(row)

        logger.info(f"CRUD: updated {self.name} id={row_id}")
        return row

    async def delete(self, db: AsyncSession, row_id: int) -> Dict[str, bool]:
        stmt = delete(self.model).where(self.model.id == row_id)
        try:
            result = await db.execute(stmt)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"CRUD: error deleting {self.name} id={row_id}: {e}", exc_info=True)
            raise
        await self._commit(db, f"deleting {self.name} id={row_id}")

        if result.rowcount == 0:
            logger.info(f"CRUD: delete of missing {self.name} id={row_id}")
            if self.delete_missing_raises:
                raise NotFoundError(self.name, row_id)
            return {"success": False}

        logger.info(f"CRUD: deleted {self.name} id={row_id}")
        return {"success": True}

    # ------------------------------------------------------------------ helpers

    def _visible(self, query, visible_only: bool):
        if visible_only and self.visibility_column is not None:
            query = query.where(self.visibility_column == true())
        return query

    async def _get_unfiltered(self, db: AsyncSession, row_id: int) -> Optional[ModelT]:
        try:
            result = await db.execute(select(self.model).where(self.model.id == row_id))
        except SQLAlchemyError as e:
            logger.error(f"CRUD: error fetching {self.name} id={row_id}: {e}", exc_info=True)
            raise
        return result.scalar_one_or_none()

    async def _scalars(self, db: AsyncSession, query) -> List[ModelT]:
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"CRUD: error listing {self.name}: {e}", exc_info=True)
            raise
        return list(result.scalars().all())

    async def _commit(self, db: AsyncSession, action: str) -> None:
        try:
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"CRUD: database error while {action}: {e}", exc_info=True)
            raise
