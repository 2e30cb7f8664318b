"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salary_engine import __version__
from salary_engine.api.routes import (
    health_router,
    ledger_router,
    payroll_router,
    reports_router,
    site_router,
)
from salary_engine.calculators.engine import PayrollEngine
from salary_engine.config import Settings, get_settings
from salary_engine.reports.builder import ReportBuilder
from salary_engine.services.ledger import PayrollLedger
from salary_engine.services.preferences import ThemePreference

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info(
        "Salary engine %s started with %d PAYE brackets",
        app.state.settings.engine_version,
        len(app.state.engine.tax_calculator.brackets),
    )
    yield
    logger.info("Salary engine stopped with %d ledger entries", len(app.state.ledger))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Salary Engine API",
        description="Ghana PAYE and SSNIT payroll calculator",
        version=__version__,
        lifespan=lifespan,
    )

    # Session state; the engine validates its bracket table here
    engine = PayrollEngine.from_settings(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.ledger = PayrollLedger()
    app.state.report_builder = ReportBuilder(engine.rates)
    app.state.theme = ThemePreference()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(site_router, prefix="/api/v1")
    app.include_router(payroll_router, prefix="/api/v1")
    app.include_router(ledger_router, prefix="/api/v1")
    app.include_router(reports_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
