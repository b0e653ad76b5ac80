"""Infrastructure layer - report formatting and export."""

from .formatters import JsonExporter, LoadReportFormatter, ZoneListFormatter

__all__ = ["JsonExporter", "LoadReportFormatter", "ZoneListFormatter"]
