"""Shared output handlers for CLI commands."""

import csv
import io
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from rich.console import Console

from codeeval.core.constants import FormattingConstants

console = Console()


def _write_or_print(content: str, output_path: Path | None) -> None:
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(content)


def handle_json_output(
    data: Any,
    output_path: Path | None,
    transformer: Callable[[Any], Any] | None = None,
) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (can be any type)
        output_path: Optional file path to save output
        transformer: Optional function to transform data before serialization
    """
    output_data = transformer(data) if transformer else data
    json_content = json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str)
    _write_or_print(json_content, output_path)


def handle_csv_output(
    rows: list[dict[str, Any]],
    output_path: Path | None,
    fieldnames: list[str] | None = None,
) -> None:
    """Handle CSV format output.

    Args:
        rows: Flat dicts, one per CSV row
        output_path: Optional file path to save output
        fieldnames: Column order (defaults to the first row's keys)
    """
    string_buffer = io.StringIO()

    if rows:
        fieldnames = fieldnames or list(rows[0].keys())
        writer = csv.DictWriter(string_buffer, fieldnames=fieldnames)
        writer.writeheader()

        for row in rows:
            # Flatten nested values for CSV
            writer.writerow(
                {
                    key: json.dumps(value, default=str) if isinstance(value, dict | list) else value
                    for key, value in row.items()
                }
            )

    _write_or_print(string_buffer.getvalue(), output_path)
