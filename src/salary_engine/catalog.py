"""Directory of business-utility tools shown on the landing page."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ToolStatus(str, Enum):
    AVAILABLE = "available"
    COMING_SOON = "coming_soon"
    EXTERNAL = "external"


@dataclass(frozen=True)
class Tool:
    title: str
    description: str
    href: str
    status: ToolStatus


TOOLS: tuple[Tool, ...] = (
    Tool(
        title="Salary Calculator",
        description="Compute gross-to-net pay with PAYE and SSNIT, and export payroll reports.",
        href="/tools/salary",
        status=ToolStatus.AVAILABLE,
    ),
    Tool(
        title="Tax Calculator",
        description="Run quick tax calculations and check liability estimates.",
        href="/tools/tax",
        status=ToolStatus.AVAILABLE,
    ),
    Tool(
        title="Cash Desk",
        description="Track drawer activity and reconcile daily cash flow.",
        href="/tools/cash-desk",
        status=ToolStatus.COMING_SOON,
    ),
    Tool(
        title="Ledgerly",
        description="Open the Ledgerly workspace for reporting and audit trails.",
        href="https://ledgerly.levelsfield.com",
        status=ToolStatus.EXTERNAL,
    ),
)


def list_tools(status: ToolStatus | None = None) -> list[Tool]:
    """Return tools in display order, optionally filtered by status."""
    if status is None:
        return list(TOOLS)
    return [t for t in TOOLS if t.status == status]
