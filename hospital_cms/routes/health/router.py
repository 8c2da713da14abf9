from datetime import datetime, timezone

from fastapi import APIRouter

from hospital_cms.schemas.shared import HealthStatus

router = APIRouter(prefix="/rpc", tags=["health"])


@router.post("/healthcheck", response_model=HealthStatus)
async def healthcheck():
    """Liveness probe."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc)}
