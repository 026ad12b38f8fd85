"""
Printer interface and the plain-text report printer.
"""

from __future__ import annotations

from .base import PrinterRegistry, TypePrinter, resolve_reference
from .report import ReportPrinter, describe_type

__all__ = [
    "PrinterRegistry",
    "ReportPrinter",
    "TypePrinter",
    "describe_type",
    "resolve_reference",
]
