"""Console rendering helpers for the CLI."""

from .report import PartsDisplay, format_parts_report

__all__ = ["PartsDisplay", "format_parts_report"]
