"""Reporting helpers for estimates."""

from .summary import ConsoleProgressNotifier, estimate_table, export_ratios, format_estimate

__all__ = ["ConsoleProgressNotifier", "estimate_table", "export_ratios", "format_estimate"]
