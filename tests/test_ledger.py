"""Unit tests for the session payroll ledger."""

from decimal import Decimal
from uuid import uuid4

import pytest

from salary_engine.services.ledger import MissingEmployeeNameError, PayrollLedger


def _add(ledger, engine, name, payroll_input):
    breakdown = engine.compute_breakdown(payroll_input)
    return ledger.add(name, payroll_input, breakdown, engine.compute_ssnit_tiers(breakdown.basic_pay))


class TestPayrollLedger:
    def test_newest_first(self, ledger):
        assert [e.employee_name for e in ledger] == ["Kofi Boateng", "Ama Mensah"]
        assert len(ledger) == 2

    def test_name_is_trimmed(self, engine, make_input):
        ledger = PayrollLedger()
        entry = _add(ledger, engine, "  Efua Owusu  ", make_input(basic="800"))
        assert entry.employee_name == "Efua Owusu"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, engine, make_input, name):
        ledger = PayrollLedger()
        with pytest.raises(MissingEmployeeNameError, match="Please enter an employee name."):
            _add(ledger, engine, name, make_input(basic="800"))
        assert ledger.is_empty

    def test_entries_get_unique_ids(self, engine, make_input):
        ledger = PayrollLedger()
        first = _add(ledger, engine, "Yaw", make_input(basic="800"))
        second = _add(ledger, engine, "Yaw", make_input(basic="800"))
        assert first.entry_id != second.entry_id

    def test_entry_is_frozen_snapshot(self, ledger):
        entry = ledger.entries[-1]
        assert entry.breakdown.net_pay == Decimal("888.87")
        assert entry.ssnit.tier1_employer == Decimal("50.00")
        assert entry.ssnit.tier2_total == Decimal("135.00")

    def test_get(self, ledger):
        entry = ledger.entries[0]
        assert ledger.get(entry.entry_id) is entry
        assert ledger.get(uuid4()) is None

    def test_remove_by_id(self, ledger):
        kofi, ama = ledger.entries
        assert ledger.remove(kofi.entry_id) is True
        assert ledger.entries == [ama]

    def test_remove_unknown_id_is_noop(self, ledger):
        assert ledger.remove(uuid4()) is False
        assert len(ledger) == 2

    def test_entries_returns_a_copy(self, ledger):
        ledger.entries.clear()
        assert len(ledger) == 2

    def test_clear(self, ledger):
        ledger.clear()
        assert ledger.is_empty
