"""Salary engine: Ghana PAYE and SSNIT payroll calculations with report export."""

__version__ = "1.0.0"
