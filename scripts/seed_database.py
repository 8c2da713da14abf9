# scripts/seed_database.py
import asyncio
import logging

from sqlalchemy import delete

from hospital_cms.config.settings import settings as app_settings
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
from hospital_cms.db.crud.menu_item import menu_items
from hospital_cms.db.crud.about_us import update_about_us
from hospital_cms.db.crud.doctor import doctors
from hospital_cms.db.crud.management_staff import management_staff
from hospital_cms.db.crud.service import services
from hospital_cms.db.crud.news import news

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("seed_database")

# --- Seed Data ---
MENU = [
    ("Home", "/", 1),
    ("About Us", "/about", 2),
    ("Doctors", "/doctors", 3),
    ("Services", "/services", 4),
    ("News", "/news", 5),
    ("Contact", "/contact", 6),
]

ABOUT_US = (
    "Founded in 1950, our hospital has grown from a twenty-bed clinic into a "
    "regional referral centre offering emergency, surgical and outpatient care."
)

DOCTORS = [
    ("Dr. Rita Haddad", "Cardiology"),
    ("Dr. Karim Nassar", "Pediatrics"),
    ("Dr. Layal Mansour", "Neurology"),
    ("Dr. Fadi Khoury", "Orthopedics"),
    ("Dr. Nour Saad", "Dermatology"),
]

STAFF = [
    ("Samir Fares", "Chief Executive Officer"),
    ("Maya Habib", "Director of Nursing"),
    ("Joseph Sleiman", "Chief Financial Officer"),
]

SERVICES = [
    ("Emergency Care", "Around-the-clock emergency department.", ["Trauma bay", "24/7 lab", "Helipad"]),
    ("Radiology", "Diagnostic imaging for inpatients and outpatients.", ["MRI", "CT", "Ultrasound"]),
    ("Maternity", "Prenatal, delivery and postnatal care.", ["Birthing suites", "NICU"]),
]

NEWS = [
    ("New cardiac unit opens", "The cardiac unit welcomes its first patients this week.", True),
    ("Free screening day", "Join us for a community blood-pressure screening day.", True),
    ("Visiting hours update", "Draft of the new visiting hours policy.", False),
]


async def clear_tables(db) -> None:
    logger.info("Clearing existing content ...")
    for model in (
        ContactMessageModel,
        NewsModel,
        ServiceModel,
        ManagementStaffModel,
        DoctorModel,
        AboutUsModel,
        MenuItemModel,
    ):
        await db.execute(delete(model))
    await db.commit()


async def seed(db) -> None:
    for title, url, order_index in MENU:
        await menu_items.create(db, {"title": title, "url": url, "order_index": order_index})
    logger.info(f"Seeded {len(MENU)} menu items")

    await update_about_us(db, ABOUT_US)
    logger.info("Seeded about us content")

    for name, specialization in DOCTORS:
        await doctors.create(db, {"name": name, "specialization": specialization})
    logger.info(f"Seeded {len(DOCTORS)} doctors")

    for name, position in STAFF:
        await management_staff.create(db, {"name": name, "position": position})
    logger.info(f"Seeded {len(STAFF)} management staff")

    for title, description, facilities in SERVICES:
        await services.create(
            db, {"title": title, "description": description, "facilities": facilities}
        )
    logger.info(f"Seeded {len(SERVICES)} services")

    for title, content, is_published in NEWS:
        await news.create(db, {"title": title, "content": content, "is_published": is_published})
    logger.info(f"Seeded {len(NEWS)} news articles")


async def main() -> None:
    logger.info(f"Connecting to database at: {app_settings.database_url}")
    engine = await get_engine(str(app_settings.database_url))
    set_global_session_factory(await get_session_factory(engine))

    try:
        async with script_db_session() as db:
            await clear_tables(db)
            await seed(db)
        logger.info("Database seeding complete.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
