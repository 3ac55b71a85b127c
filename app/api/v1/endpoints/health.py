# app/api/v1/endpoints/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.domain.errors import RateTableUnavailable
from app.infra.providers.fixer import FixerClient, get_fixer_client
from app.schemas.health_schemas import ComponentStatus, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(client: FixerClient = Depends(get_fixer_client)):
    t = datetime.now(timezone.utc).isoformat()

    try:
        snapshot = client.latest()
        exchange = ComponentStatus(
            status="operational",
            detail="Fixer FX service",
            base=snapshot.base,
            last_update=snapshot.date,
        )
    except RateTableUnavailable as e:
        exchange = ComponentStatus(status="major_outage", detail=f"Fixer error: {e}")

    if exchange.status == "operational":
        indicator = "operational"
        desc = "All systems functional."
    else:
        indicator = "major_outage"
        desc = "Exchange rate source unavailable."

    return HealthResponse(
        service=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        time=t,
        indicator=indicator,
        description=desc,
        components={"exchange": exchange},
    )
