"""
urlsucker/url_discovery/reporter.py

Output formatters for discovery snapshots.

Supports:
- JSON: One object per row
- Table: rich table with Host / Path / Source JS File columns
"""

import json
from typing import TextIO

from rich.console import Console
from rich.table import Table

from urlsucker.url_discovery.models import SnapshotRow


def write_json(rows: list[SnapshotRow], output: TextIO) -> None:
    """
    Write rows as a JSON array.

    Args:
        rows: Snapshot rows to serialize.
        output: File-like object to write to.
    """
    data = [row.model_dump(mode="json") for row in rows]
    json.dump(data, output, indent=2, ensure_ascii=False)
    output.write("\n")


def build_table(rows: list[SnapshotRow]) -> Table:
    """Build the three-column view of the rows."""
    table = Table(title="URLSucker", show_lines=False)
    table.add_column("Host", style="cyan", min_width=20)
    table.add_column("Path", min_width=40)
    table.add_column("Source JS File", style="green")
    for row in rows:
        table.add_row(row.host, row.path, row.source_file)
    return table


def write_table(rows: list[SnapshotRow], output: TextIO) -> None:
    """
    Write rows as a table, followed by a total line.
    """
    console = Console(file=output, width=160, highlight=False)
    console.print(build_table(rows))
    origins = {row.host for row in rows}
    console.print(f"Total: {len(rows)} URLs across {len(origins)} hosts")
