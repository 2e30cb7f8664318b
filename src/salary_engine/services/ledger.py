"""In-memory session ledger of frozen payroll breakdowns."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator
from uuid import UUID, uuid4

from salary_engine.calculators.types import PayrollBreakdown, PayrollInput, SsnitTiers

logger = logging.getLogger(__name__)


class MissingEmployeeNameError(ValueError):
    """Raised when a ledger entry is added without an employee name."""

    def __init__(self) -> None:
        super().__init__("Please enter an employee name.")


@dataclass(frozen=True)
class LedgerEntry:
    """A payroll breakdown frozen against an employee name."""

    employee_name: str
    payroll_input: PayrollInput
    breakdown: PayrollBreakdown
    ssnit: SsnitTiers
    entry_id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class PayrollLedger:
    """Session-owned list of ledger entries, newest first.

    Entries are only ever prepended or removed by id; they are never
    recalculated once added.
    """

    def __init__(self) -> None:
        self._entries: list[LedgerEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> list[LedgerEntry]:
        return list(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def add(
        self,
        employee_name: str,
        payroll_input: PayrollInput,
        breakdown: PayrollBreakdown,
        ssnit: SsnitTiers,
    ) -> LedgerEntry:
        """Freeze a breakdown into a new entry at the front of the ledger.

        Raises:
            MissingEmployeeNameError: If the trimmed name is empty
        """
        name = (employee_name or "").strip()
        if not name:
            raise MissingEmployeeNameError()

        entry = LedgerEntry(
            employee_name=name,
            payroll_input=payroll_input,
            breakdown=breakdown,
            ssnit=ssnit,
        )
        self._entries.insert(0, entry)
        logger.info("Added ledger entry %s for %s", entry.entry_id, name)
        return entry

    def get(self, entry_id: UUID) -> LedgerEntry | None:
        return next((e for e in self._entries if e.entry_id == entry_id), None)

    def remove(self, entry_id: UUID) -> bool:
        """Remove an entry by id. Returns False if no entry matched."""
        remaining = [e for e in self._entries if e.entry_id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        if removed:
            logger.info("Removed ledger entry %s", entry_id)
        return removed

    def clear(self) -> None:
        self._entries = []
