"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel

from salary_engine.api.dependencies import AppSettings, Engine
from salary_engine.calculators.tax_tables import BracketTableError, validate_brackets

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    bracket_table: str
    version: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(engine: Engine, settings: AppSettings) -> HealthResponse:
    """Check API health and the loaded bracket table."""
    table_status = "valid"
    try:
        validate_brackets(engine.tax_calculator.brackets)
    except BracketTableError:
        table_status = "invalid"

    return HealthResponse(
        status="healthy" if table_status == "valid" else "degraded",
        timestamp=datetime.now(timezone.utc),
        bracket_table=table_status,
        version=settings.engine_version,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
