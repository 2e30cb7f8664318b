"""Landing directory and display preference endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from salary_engine.api.dependencies import Theme
from salary_engine.api.schemas import ThemeResponse, ToolResponse
from salary_engine.catalog import ToolStatus, list_tools

router = APIRouter(tags=["site"])


@router.get("/tools", response_model=list[ToolResponse])
async def tools(
    status_filter: Annotated[ToolStatus | None, Query(alias="status")] = None,
) -> list[ToolResponse]:
    """Tools listed on the landing page."""
    return [
        ToolResponse(
            title=t.title,
            description=t.description,
            href=t.href,
            status=t.status.value,
        )
        for t in list_tools(status_filter)
    ]


@router.get("/preferences/theme", response_model=ThemeResponse)
async def get_theme(theme: Theme) -> ThemeResponse:
    return ThemeResponse(theme=theme.current().value)


@router.post("/preferences/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(theme: Theme) -> ThemeResponse:
    """Flip between light and dark and remember the choice."""
    return ThemeResponse(theme=theme.toggle().value)
