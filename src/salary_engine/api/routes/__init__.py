"""API routes."""

from salary_engine.api.routes.health import router as health_router
from salary_engine.api.routes.ledger import router as ledger_router
from salary_engine.api.routes.payroll import router as payroll_router
from salary_engine.api.routes.reports import router as reports_router
from salary_engine.api.routes.site import router as site_router

__all__ = [
    "health_router",
    "ledger_router",
    "payroll_router",
    "reports_router",
    "site_router",
]
