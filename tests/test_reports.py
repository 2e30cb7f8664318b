"""Unit tests for report assembly, export and the text summary."""

import json
from datetime import date, datetime
from decimal import Decimal

import pytest

from salary_engine.calculators.types import ContributionRates
from salary_engine.reports.builder import ReportBuilder, ReportKind
from salary_engine.reports.exporters import (
    EmptyLedgerError,
    ReportFormat,
    export_report,
    to_csv,
    to_json,
    to_pdf,
)
from salary_engine.reports.summary import build_summary_text
from salary_engine.services.ledger import PayrollLedger

AS_OF = date(2024, 6, 30)


@pytest.fixture
def builder():
    return ReportBuilder()


@pytest.fixture
def ama_only(engine, make_input):
    ledger = PayrollLedger()
    payroll_input = make_input(basic="1000")
    breakdown = engine.compute_breakdown(payroll_input)
    ledger.add("Ama Mensah", payroll_input, breakdown, engine.compute_ssnit_tiers(breakdown.basic_pay))
    return ledger


class TestReportBuilder:
    def test_payroll_columns(self, builder):
        headers = [c.header for c in builder.columns(ReportKind.PAYROLL)]
        assert headers == [
            "Employee",
            "Basic Salary",
            "Allowances",
            "Gross Pay",
            "SSNIT Employee (5.5%)",
            "PAYE",
            "Loan",
            "Total Deductions",
            "Net Pay",
            "SSNIT Employer (13%)",
        ]

    def test_paye_columns(self, builder):
        headers = [c.header for c in builder.columns(ReportKind.PAYE)]
        assert headers == ["Employee", "Chargeable Income", "PAYE"]

    def test_ssnit_columns(self, builder):
        headers = [c.header for c in builder.columns(ReportKind.SSNIT)]
        assert headers == [
            "Employee",
            "Basic Salary",
            "Tier 1 Employer (5%)",
            "Tier 2 Employee (5.5%)",
            "Tier 2 Employer (8%)",
            "Tier 2 Total (13.5%)",
        ]

    def test_headers_follow_configured_rates(self):
        builder = ReportBuilder(
            ContributionRates(
                employee=Decimal("0.05"),
                employer_tier1=Decimal("0.05"),
                employer_tier2=Decimal("0.085"),
            )
        )
        headers = [c.header for c in builder.columns(ReportKind.SSNIT)]
        assert headers[3] == "Tier 2 Employee (5%)"
        assert headers[5] == "Tier 2 Total (13.5%)"

    def test_rows_in_ledger_order(self, builder, ledger):
        report = builder.build(ReportKind.PAYROLL, ledger.entries, as_of=AS_OF)
        assert [row[0] for row in report.rows] == ["Kofi Boateng", "Ama Mensah"]
        assert report.rows[0][1:] == [
            Decimal(v)
            for v in (
                "2500.00",
                "250.00",
                "2750.00",
                "137.50",
                "347.94",
                "200.00",
                "685.44",
                "2064.56",
                "325.00",
            )
        ]

    def test_ssnit_report_reads_frozen_tiers(self, builder, ledger):
        report = builder.build(ReportKind.SSNIT, ledger.entries, as_of=AS_OF)
        assert report.records[1] == {
            "employee": "Ama Mensah",
            "basic_salary": Decimal("1000.00"),
            "tier_1_employer": Decimal("50.00"),
            "tier_2_employee": Decimal("55.00"),
            "tier_2_employer": Decimal("80.00"),
            "tier_2_total": Decimal("135.00"),
        }

    def test_ssnit_report_ignores_later_rate_changes(self, ledger):
        """Entries keep the tiers computed when they were added."""
        builder = ReportBuilder(
            ContributionRates(
                employee=Decimal("0.05"),
                employer_tier1=Decimal("0.05"),
                employer_tier2=Decimal("0.085"),
            )
        )
        report = builder.build(ReportKind.SSNIT, ledger.entries, as_of=AS_OF)
        assert report.records[1]["tier_2_employee"] == Decimal("55.00")

    def test_title_and_filename(self, builder, ledger):
        report = builder.build("paye", ledger.entries, as_of=AS_OF)
        assert report.kind == ReportKind.PAYE
        assert report.title == "PAYE Report"
        assert report.filename == "paye-report-2024-06-30"

    def test_empty_ledger_builds_empty_report(self, builder):
        report = builder.build(ReportKind.PAYROLL, [], as_of=AS_OF)
        assert report.is_empty
        assert len(report.headers) == 10


class TestCsvExport:
    def test_payroll_csv(self, builder, ama_only):
        report = builder.build(ReportKind.PAYROLL, ama_only.entries, as_of=AS_OF)
        assert to_csv(report) == (
            '"Employee","Basic Salary","Allowances","Gross Pay","SSNIT Employee (5.5%)",'
            '"PAYE","Loan","Total Deductions","Net Pay","SSNIT Employer (13%)"\n'
            '"Ama Mensah","1000.00","0.00","1000.00","55.00","56.13","0.00","111.13",'
            '"888.87","130.00"'
        )

    def test_quotes_are_doubled(self, builder, engine, make_input):
        ledger = PayrollLedger()
        payroll_input = make_input(basic="1000")
        breakdown = engine.compute_breakdown(payroll_input)
        ledger.add(
            'Kwame "KK" Asante, Jr',
            payroll_input,
            breakdown,
            engine.compute_ssnit_tiers(breakdown.basic_pay),
        )
        report = builder.build(ReportKind.PAYE, ledger.entries, as_of=AS_OF)
        assert to_csv(report).splitlines()[1] == '"Kwame ""KK"" Asante, Jr","945.00","56.13"'

    def test_no_trailing_newline(self, builder, ledger):
        report = builder.build(ReportKind.SSNIT, ledger.entries, as_of=AS_OF)
        content = to_csv(report)
        assert not content.endswith("\n")
        assert len(content.split("\n")) == 3


class TestJsonExport:
    def test_paye_json(self, builder, ama_only):
        report = builder.build(ReportKind.PAYE, ama_only.entries, as_of=AS_OF)
        content = to_json(report)
        assert json.loads(content) == [
            {"employee": "Ama Mensah", "chargeable_income": 945.0, "paye": 56.13}
        ]
        assert '\n  {\n    "employee": "Ama Mensah"' in content
        assert '"chargeable_income": 945,' in content
        assert '"paye": 56.13' in content

    def test_keys_in_column_order(self, builder, ledger):
        report = builder.build(ReportKind.PAYROLL, ledger.entries, as_of=AS_OF)
        first = json.loads(to_json(report))[0]
        assert list(first) == [
            "employee",
            "basic_salary",
            "allowances",
            "gross_pay",
            "ssnit_employee",
            "paye",
            "loan",
            "total_deductions",
            "net_pay",
            "ssnit_employer",
        ]


class TestPdfExport:
    def test_renders_pdf(self, builder, ledger):
        report = builder.build(ReportKind.PAYROLL, ledger.entries, as_of=AS_OF)
        content = to_pdf(report, generated_at=datetime(2024, 6, 30, 9, 15))
        assert content.startswith(b"%PDF")
        assert len(content) > 1000

    def test_many_rows_span_pages(self, builder, engine, make_input):
        ledger = PayrollLedger()
        for i in range(80):
            payroll_input = make_input(basic=str(1000 + i))
            breakdown = engine.compute_breakdown(payroll_input)
            ledger.add(
                f"Employee {i}",
                payroll_input,
                breakdown,
                engine.compute_ssnit_tiers(breakdown.basic_pay),
            )
        report = builder.build(ReportKind.PAYROLL, ledger.entries, as_of=AS_OF)
        content = to_pdf(report)
        pages = content.count(b"/Type /Page") - content.count(b"/Type /Pages")
        assert pages >= 2


class TestExportReport:
    @pytest.mark.parametrize(
        "fmt, media_type",
        [
            (ReportFormat.CSV, "text/csv"),
            (ReportFormat.JSON, "application/json"),
            (ReportFormat.PDF, "application/pdf"),
        ],
    )
    def test_artifact(self, builder, ledger, fmt, media_type):
        report = builder.build(ReportKind.PAYROLL, ledger.entries, as_of=AS_OF)
        artifact = export_report(report, fmt)
        assert artifact.filename == f"payroll-report-2024-06-30.{fmt.value}"
        assert artifact.media_type == media_type
        assert artifact.content

    @pytest.mark.parametrize("fmt", list(ReportFormat))
    def test_empty_report_rejected(self, builder, fmt):
        report = builder.build(ReportKind.PAYE, [], as_of=AS_OF)
        with pytest.raises(EmptyLedgerError, match="Add at least one employee"):
            export_report(report, fmt)


class TestSummaryText:
    def test_named_summary(self, engine, make_input):
        payroll_input = make_input(basic="1000", food="200")
        breakdown = engine.compute_breakdown(payroll_input)
        text = build_summary_text(payroll_input, breakdown, employee_name=" Ama Mensah ")
        lines = text.split("\n")

        assert lines[0] == "Salary Summary - Ama Mensah"
        assert len(lines) == 16
        assert "Food allowance: GHS 200.00" in lines
        assert "Gross pay: GHS 1,200.00" in lines
        assert "Employee SSNIT (5.5%): GHS 55.00" in lines
        assert lines[-1] == "Employer SSNIT (13%): GHS 130.00"

    def test_unnamed_summary(self, engine, make_input):
        payroll_input = make_input(basic="1000")
        breakdown = engine.compute_breakdown(payroll_input)
        text = build_summary_text(payroll_input, breakdown)
        assert text.startswith("Salary Summary\n")
        assert "Net pay: GHS 888.87" in text
