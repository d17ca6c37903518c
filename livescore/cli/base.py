"""
Shared CLI framework.

Provides BaseCommand plus the table helpers the commands use to render
scoreboard summaries.
"""

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence


def format_table(
    headers: List[str],
    rows: List[List[Any]],
    numeric: Sequence[int] = (),
    gap: int = 2,
) -> str:
    """
    Render rows as a plain-text table under an underlined header.

    Column widths fit the widest cell. Columns listed in ``numeric`` are
    right-aligned so totals line up; the rest are left-aligned. Short rows
    are padded with blanks.
    """
    if not headers:
        return ""
    cells = [[str(h) for h in headers]]
    cells += [[str(row[i]) if i < len(row) else "" for i in range(len(headers))] for row in rows]
    widths = [max(len(line[i]) for line in cells) for i in range(len(headers))]
    spacer = " " * gap

    def _render(line: List[str]) -> str:
        padded = [
            cell.rjust(widths[i]) if i in numeric else cell.ljust(widths[i])
            for i, cell in enumerate(line)
        ]
        return spacer.join(padded).rstrip()

    header_line = _render(cells[0])
    return "\n".join([header_line, "-" * (sum(widths) + gap * (len(widths) - 1))] + [_render(line) for line in cells[1:]])


def summary_rows(summary: List[Dict[str, Any]]) -> List[List[str]]:
    """Rank, display line and total for each summary entry (as produced by Match.to_dict)."""
    rows = []
    for rank, entry in enumerate(summary, start=1):
        line = f"{entry['home_team']} {entry['home_score']} - {entry['away_team']} {entry['away_score']}"
        rows.append([f"{rank}.", line, str(entry["total_score"])])
    return rows


def print_summary(summary: List[Dict[str, Any]], label: str = "SUMMARY") -> None:
    """Print a ranked summary table."""
    print(f"\n{label}")
    if not summary:
        print("  (no matches in progress)")
        return
    print(format_table(["#", "Match", "Total"], summary_rows(summary), numeric=(2,)))


class BaseCommand(ABC):
    """Base for CLI subcommands."""

    name: str = ""
    help: str = ""
    description: str = ""
    epilog: str = ""

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add command-specific arguments."""
        pass

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """Execute the command. Returns exit code (0 = success)."""
        ...

    def error(self, message: str) -> int:
        """Print error to stderr and return exit code 1."""
        print(message, file=sys.stderr)
        return 1
