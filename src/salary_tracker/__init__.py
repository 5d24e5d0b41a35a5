"""Salary tracker: salary records, advance payments and payment status."""

__version__ = "1.0.0"
