"""Validation helpers for generated reports."""

from .report_schema import DEFAULT_SCHEMA, validate_report

__all__ = ["DEFAULT_SCHEMA", "validate_report"]
