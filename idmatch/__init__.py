"""Reconciliation of declared identity fields against OCR text of identity documents."""

__version__ = "1.0.0"
