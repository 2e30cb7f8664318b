"""Report preview and export endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from salary_engine.api.dependencies import AppSettings, Ledger, Reports
from salary_engine.api.schemas import ErrorResponse, ReportPreviewResponse
from salary_engine.reports.builder import ReportKind
from salary_engine.reports.exporters import EmptyLedgerError, ReportFormat, export_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/{kind}", response_model=ReportPreviewResponse)
async def preview_report(
    kind: ReportKind,
    ledger: Ledger,
    builder: Reports,
) -> ReportPreviewResponse:
    """Tabular preview of a report over the current ledger."""
    report = builder.build(kind, ledger.entries)
    return ReportPreviewResponse(
        kind=report.kind.value,
        title=report.title,
        filename=report.filename,
        headers=report.headers,
        rows=report.rows,
        records=report.records,
    )


@router.get(
    "/{kind}/export",
    responses={400: {"model": ErrorResponse}},
)
async def export(
    kind: ReportKind,
    ledger: Ledger,
    builder: Reports,
    settings: AppSettings,
    fmt: Annotated[ReportFormat, Query(alias="format")] = ReportFormat.PDF,
) -> Response:
    """Download a report as PDF, CSV or JSON."""
    report = builder.build(kind, ledger.entries)
    try:
        artifact = export_report(report, fmt, currency=settings.currency_code)
    except EmptyLedgerError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )
