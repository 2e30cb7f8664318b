"""Salary engine command line interface.

Provides tools for:
- Gross-to-net calculation
- Net-to-gross calculation
- Bracket table inspection and validation
- Report export from a JSON list of employees

Usage:
    python -m salary_engine.cli calculate --basic 1000 --food 200 --summary
    python -m salary_engine.cli reverse --net-pay 888.87
    python -m salary_engine.cli brackets --table paye.json
    python -m salary_engine.cli report --input staff.json --kind paye --format csv --output paye.csv
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from salary_engine.api.schemas import LedgerEntryCreate
from salary_engine.calculators.engine import PayrollEngine
from salary_engine.calculators.money import format_money, format_rate, parse_amount
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.tax_tables import brackets_from_payload
from salary_engine.calculators.types import Allowances, PayrollBreakdown, PayrollInput
from salary_engine.config import get_settings
from salary_engine.reports.builder import ReportBuilder, ReportKind
from salary_engine.reports.exporters import EmptyLedgerError, ReportFormat, export_report
from salary_engine.reports.summary import build_summary_text
from salary_engine.services.ledger import PayrollLedger

logger = logging.getLogger(__name__)

BREAKDOWN_LABELS = {
    "basic_pay": "Basic pay",
    "allowances_total": "Allowances",
    "gross_pay": "Gross pay",
    "employee_statutory_contribution": "Employee SSNIT",
    "chargeable_income": "Chargeable income",
    "tax": "PAYE",
    "loan_deduction": "Loan",
    "total_deductions": "Total deductions",
    "net_pay": "Net pay",
    "employer_statutory_contribution": "Employer SSNIT",
}


def parse_date(s: str) -> date:
    """Parse ISO date string."""
    return date.fromisoformat(s)


class SalaryCli:
    """Salary engine command line interface."""

    def __init__(self, engine: PayrollEngine | None = None) -> None:
        self.settings = get_settings()
        self.engine = engine or PayrollEngine.from_settings(self.settings)
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m salary_engine.cli",
            description="Ghana PAYE / SSNIT salary calculator",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=None,
            help="Logging level (default: $LOG_LEVEL)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Gross-to-net breakdown",
        )
        for flag in ("basic", "food", "transport", "utilities", "rent", "other", "loan"):
            calculate.add_argument(
                f"--{flag}",
                type=parse_amount,
                default=parse_amount(None),
                help=f"{flag.capitalize()} amount (blank or invalid counts as 0)",
            )
        calculate.add_argument(
            "--name",
            type=str,
            help="Employee name for the summary title",
        )
        calculate.add_argument(
            "--summary",
            action="store_true",
            help="Print the copyable text summary instead of the breakdown",
        )
        calculate.add_argument(
            "--json",
            action="store_true",
            help="Print the breakdown as JSON",
        )

        # reverse command
        reverse = subparsers.add_parser(
            "reverse",
            help="Net-to-gross breakdown",
        )
        reverse.add_argument(
            "--net-pay",
            type=parse_amount,
            required=True,
            help="Desired net pay",
        )
        reverse.add_argument(
            "--json",
            action="store_true",
            help="Print the breakdown as JSON",
        )

        # brackets command
        brackets = subparsers.add_parser(
            "brackets",
            help="Show and validate a PAYE bracket table",
        )
        brackets.add_argument(
            "--table",
            type=Path,
            help="JSON tax rule payload to validate (default: built-in table)",
        )

        # report command
        report = subparsers.add_parser(
            "report",
            help="Export a report for a list of employees",
        )
        report.add_argument(
            "--input",
            type=Path,
            required=True,
            help="JSON array of employees with salary fields",
        )
        report.add_argument(
            "--kind",
            type=ReportKind,
            choices=[k.value for k in ReportKind],
            default=ReportKind.PAYROLL,
            help="Report type",
        )
        report.add_argument(
            "--format",
            dest="fmt",
            type=ReportFormat,
            choices=[f.value for f in ReportFormat],
            default=ReportFormat.CSV,
            help="Output format",
        )
        report.add_argument(
            "--output",
            type=Path,
            help="Output file (default: <kind>-report-<date>.<format>)",
        )
        report.add_argument(
            "--as-of",
            type=parse_date,
            help="Report date (ISO format, default: today)",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        logging.basicConfig(
            level=(parsed.log_level or self.settings.log_level).upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )

        if not parsed.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "reverse": self._cmd_reverse,
            "brackets": self._cmd_brackets,
            "report": self._cmd_report,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _print_breakdown(self, breakdown: PayrollBreakdown, as_json: bool) -> None:
        if as_json:
            print(json.dumps({k: str(v) for k, v in breakdown.to_dict().items()}, indent=2))
            return

        currency = self.settings.currency_code
        for key, label in BREAKDOWN_LABELS.items():
            print(f"{label:<20} {format_money(getattr(breakdown, key), currency):>20}")

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Gross-to-net breakdown."""
        payroll_input = PayrollInput(
            basic_pay=args.basic,
            allowances=Allowances(
                food=args.food,
                transport=args.transport,
                utilities=args.utilities,
                rent=args.rent,
                other=args.other,
            ),
            loan_deduction=args.loan,
        )
        breakdown = self.engine.compute_breakdown(payroll_input)

        if args.summary:
            print(
                build_summary_text(
                    payroll_input,
                    breakdown,
                    rates=self.engine.rates,
                    employee_name=args.name,
                    currency=self.settings.currency_code,
                )
            )
            return 0

        self._print_breakdown(breakdown, args.json)
        return 0

    def _cmd_reverse(self, args: argparse.Namespace) -> int:
        """Net-to-gross breakdown."""
        breakdown = self.engine.compute_reverse_breakdown(args.net_pay)
        self._print_breakdown(breakdown, args.json)
        return 0

    def _cmd_brackets(self, args: argparse.Namespace) -> int:
        """Show and validate a bracket table."""
        calculator = self.engine.tax_calculator
        if args.table:
            try:
                payload = json.loads(args.table.read_text())
                calculator = TaxCalculator(brackets_from_payload(payload))
            except (OSError, ValueError, KeyError, TypeError, InvalidOperation) as e:
                # BracketTableError is a ValueError
                print(f"ERROR: {e}", file=sys.stderr)
                return 1

        print(f"{'Lower':>12} {'Upper':>12} {'Rate':>8} {'Base tax':>12}")
        for b in calculator.brackets:
            upper = str(b.upper_bound) if b.upper_bound is not None else "-"
            print(
                f"{b.lower_bound!s:>12} {upper:>12} "
                f"{format_rate(b.marginal_rate):>8} {b.base_tax_at_lower!s:>12}"
            )
        print("\nBracket table: valid")
        return 0

    def _load_ledger(self, path: Path) -> PayrollLedger:
        rows: list[dict[str, Any]] = json.loads(path.read_text())
        if not isinstance(rows, list):
            raise ValueError("Input must be a JSON array of employees")

        ledger = PayrollLedger()
        # Add in reverse so the ledger keeps the file order
        for row in reversed(rows):
            fields = LedgerEntryCreate.model_validate(row)
            payroll_input = fields.to_payroll_input()
            breakdown = self.engine.compute_breakdown(payroll_input)
            ledger.add(
                fields.name,
                payroll_input,
                breakdown,
                self.engine.compute_ssnit_tiers(breakdown.basic_pay),
            )
        logger.debug("Loaded %d employees from %s", len(ledger), path)
        return ledger

    def _cmd_report(self, args: argparse.Namespace) -> int:
        """Export a report for employees in a JSON file."""
        try:
            ledger = self._load_ledger(args.input)
            report = ReportBuilder(self.engine.rates).build(
                args.kind, ledger.entries, as_of=args.as_of
            )
            artifact = export_report(report, args.fmt, currency=self.settings.currency_code)
        except (OSError, ValueError, ValidationError, EmptyLedgerError) as e:
            # MissingEmployeeNameError is a ValueError
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        output = args.output or Path(artifact.filename)
        output.write_bytes(artifact.content)
        print(f"Wrote {len(report.rows)} rows to {output}")
        return 0


def main() -> int:
    """CLI entry point."""
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
