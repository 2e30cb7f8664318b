"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from salary_engine.calculators.engine import PayrollEngine
from salary_engine.config import Settings
from salary_engine.reports.builder import ReportBuilder
from salary_engine.services.ledger import PayrollLedger
from salary_engine.services.preferences import ThemePreference


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_engine(request: Request) -> PayrollEngine:
    return request.app.state.engine


def get_ledger(request: Request) -> PayrollLedger:
    """Session ledger held on the application."""
    return request.app.state.ledger


def get_report_builder(request: Request) -> ReportBuilder:
    return request.app.state.report_builder


def get_theme_preference(request: Request) -> ThemePreference:
    return request.app.state.theme


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_app_settings)]
Engine = Annotated[PayrollEngine, Depends(get_engine)]
Ledger = Annotated[PayrollLedger, Depends(get_ledger)]
Reports = Annotated[ReportBuilder, Depends(get_report_builder)]
Theme = Annotated[ThemePreference, Depends(get_theme_preference)]
