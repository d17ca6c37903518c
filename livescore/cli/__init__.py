"""Livescore command line interface."""

from livescore.cli.base import BaseCommand, format_table, print_summary, summary_rows

__all__ = [
    "BaseCommand",
    "format_table",
    "print_summary",
    "summary_rows",
]
