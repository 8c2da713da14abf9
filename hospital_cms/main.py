from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from hospital_cms.config.settings import settings
from hospital_cms.core.errors import register_exception_handlers
from hospital_cms.db.base import get_engine, get_session_factory

# -------------------------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application start-up & shutdown hooks."""
    # ------------------------------------------------------------------ start‑up -----
    logger.info("Application startup …")

    engine = None
    try:
        logger.info("Initializing Database Engine...")
        engine = await get_engine(str(settings.database_url), echo=settings.sql_echo)
        app.state.engine = engine
        logger.info("DB engine ready and stored in app state.")

        session_factory = await get_session_factory(engine)
        app.state.session_factory = session_factory
        logger.info("DB session factory ready.")
    except Exception as e:
        logger.critical(f"CRITICAL ERROR DURING STARTUP INITIALIZATIONS: {e}", exc_info=True)
        if engine:
            try:
                await engine.dispose()
                logger.info("Disposed engine after startup failure.")
            except Exception as dispose_e:
                logger.error(f"Error disposing engine after startup failure: {dispose_e}")
        raise

    # ------------------------------------------------ give control back
    yield

    # ------------------------------------------------ shutdown --------
    logger.info("Application shutdown …")
    try:
        await engine.dispose()
        logger.info("DB engine disposed")
    except Exception:
        logger.exception("Error disposing DB engine")

    logger.info("Shutdown complete")


# -------------------------------------------------------------------------------------
# FastAPI application instance
# -------------------------------------------------------------------------------------
app = FastAPI(title="Hospital Website CMS", lifespan=lifespan)

# CORS -------------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o) for o in settings.cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# ------------------------------------------------------------------- routes ---------
from hospital_cms.routes.health.router import router as health_router  # noqa: E402
from hospital_cms.routes.menu_items.router import router as menu_items_router  # noqa: E402
from hospital_cms.routes.about_us.router import router as about_us_router  # noqa: E402
from hospital_cms.routes.doctors.router import router as doctors_router  # noqa: E402
from hospital_cms.routes.management_staff.router import router as management_staff_router  # noqa: E402
from hospital_cms.routes.services.router import router as services_router  # noqa: E402
from hospital_cms.routes.news.router import router as news_router  # noqa: E402
from hospital_cms.routes.contact_messages.router import router as contact_messages_router  # noqa: E402

app.include_router(health_router)
app.include_router(menu_items_router)
app.include_router(about_us_router)
app.include_router(doctors_router)
app.include_router(management_staff_router)
app.include_router(services_router)
app.include_router(news_router)
app.include_router(contact_messages_router)
