"""Report building and export."""

from salary_engine.reports.builder import Report, ReportBuilder, ReportKind
from salary_engine.reports.exporters import (
    EmptyLedgerError,
    ExportArtifact,
    ReportFormat,
    export_report,
    to_csv,
    to_json,
    to_pdf,
)
from salary_engine.reports.summary import build_summary_text

__all__ = [
    "Report",
    "ReportBuilder",
    "ReportKind",
    "EmptyLedgerError",
    "ExportArtifact",
    "ReportFormat",
    "export_report",
    "to_csv",
    "to_json",
    "to_pdf",
    "build_summary_text",
]
