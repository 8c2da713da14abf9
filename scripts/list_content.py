import asyncio
from typing import Dict

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.config.settings import settings
from hospital_cms.db.base import get_engine, get_session_factory
from hospital_cms.db.session import set_global_session_factory, script_db_session
from hospital_cms.db.models import (
    MenuItemModel,
    AboutUsModel,
    DoctorModel,
    ManagementStaffModel,
    ServiceModel,
    NewsModel,
    ContactMessageModel,
)

TABLES = [
    MenuItemModel,
    AboutUsModel,
    DoctorModel,
    ManagementStaffModel,
    ServiceModel,
    NewsModel,
    ContactMessageModel,
]


async def count_rows(db: AsyncSession) -> Dict[str, int]:
    """Row count per table, keyed by table name."""
    counts = {}
    for model in TABLES:
        result = await db.execute(select(func.count(model.id)))
        counts[model.__tablename__] = result.scalar_one()
    return counts


async def active_doctors(db: AsyncSession):
    result = await db.execute(
        select(DoctorModel).where(DoctorModel.is_active.is_(True)).order_by(DoctorModel.name)
    )
    return result.scalars().all()


async def report() -> None:
    async with script_db_session() as db:
        counts = await count_rows(db)
        doctors = await active_doctors(db)

    print("-" * 40)
    print(f"{'Table':<25} {'Rows':>10}")
    print("-" * 40)
    for table, count in counts.items():
        print(f"{table:<25} {count:>10}")

    if doctors:
        print()
        print(f"Active doctors ({len(doctors)}):")
        for doctor in doctors:
            print(f"  {doctor.id:<5} {doctor.name:<25} {doctor.specialization}")


async def main() -> None:
    print("Connecting to database at:", settings.database_url)
    engine = await get_engine(str(settings.database_url))
    set_global_session_factory(await get_session_factory(engine))

    try:
        await report()
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
