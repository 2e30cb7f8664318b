"""Report export to CSV, JSON and PDF."""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from salary_engine.calculators.money import DEFAULT_CURRENCY, format_money
from salary_engine.reports.builder import Cell, Report

logger = logging.getLogger(__name__)

HEADER_FILL = colors.Color(30 / 255, 90 / 255, 106 / 255)
PAGE_MARGIN = 40  # points


class ReportFormat(str, Enum):
    """Export file formats."""

    PDF = "pdf"
    CSV = "csv"
    JSON = "json"


MEDIA_TYPES = {
    ReportFormat.PDF: "application/pdf",
    ReportFormat.CSV: "text/csv",
    ReportFormat.JSON: "application/json",
}


class EmptyLedgerError(Exception):
    """Raised when exporting a report that has no rows."""

    def __init__(self) -> None:
        super().__init__("Add at least one employee to generate a report.")


@dataclass(frozen=True)
class ExportArtifact:
    """A generated export file."""

    filename: str
    media_type: str
    content: bytes


def _csv_cell(value: Cell) -> str:
    if value is None:
        return ""
    return str(value)


def to_csv(report: Report) -> str:
    """Render a report as CSV.

    Every field is double-quoted with embedded quotes doubled; rows are
    joined by newlines with no trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(report.headers)
    writer.writerows([[_csv_cell(c) for c in row] for row in report.rows])
    return buffer.getvalue().rstrip("\n")


def _json_default(o: Any) -> Any:
    # Money goes out as JSON numbers, whole amounts without a fraction
    if isinstance(o, Decimal):
        return int(o) if o == o.to_integral_value() else float(o)
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def to_json(report: Report) -> str:
    """Render report records as a 2-space indented JSON array."""
    return json.dumps(report.records, indent=2, default=_json_default, ensure_ascii=False)


def to_pdf(
    report: Report,
    generated_at: datetime | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> bytes:
    """Render a report as a landscape A4 PDF table.

    The header row repeats on every page.
    """
    generated_at = generated_at or datetime.now()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=report.title,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontName="Helvetica-Bold",
        fontSize=14,
        alignment=TA_LEFT,
    )
    meta_style = ParagraphStyle(
        "ReportMeta",
        parent=styles["Normal"],
        fontName="Helvetica",
        fontSize=9,
    )

    data: list[list[str]] = [list(report.headers)]
    for row in report.rows:
        data.append(
            [format_money(c, currency) if isinstance(c, Decimal) else _csv_cell(c) for c in row]
        )

    table = Table(data, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("LEFTPADDING", (0, 0), (-1, -1), 6),
                ("RIGHTPADDING", (0, 0), (-1, -1), 6),
                ("TOPPADDING", (0, 0), (-1, -1), 6),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
            ]
        )
    )

    story = [
        Paragraph(escape(report.title), title_style),
        Paragraph(f"Generated {generated_at:%Y-%m-%d %H:%M:%S}", meta_style),
        Spacer(1, 12),
        table,
    ]
    doc.build(story)
    return buffer.getvalue()


def export_report(
    report: Report,
    fmt: ReportFormat,
    generated_at: datetime | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> ExportArtifact:
    """Render a report in the requested format.

    Raises:
        EmptyLedgerError: If the report has no rows
    """
    if report.is_empty:
        raise EmptyLedgerError()

    fmt = ReportFormat(fmt)
    if fmt == ReportFormat.JSON:
        content = to_json(report).encode("utf-8")
    elif fmt == ReportFormat.CSV:
        content = to_csv(report).encode("utf-8")
    else:
        content = to_pdf(report, generated_at=generated_at, currency=currency)

    logger.info(
        "Exported %s report (%d rows) as %s", report.kind.value, len(report.rows), fmt.value
    )
    return ExportArtifact(
        filename=f"{report.filename}.{fmt.value}",
        media_type=MEDIA_TYPES[fmt],
        content=content,
    )
