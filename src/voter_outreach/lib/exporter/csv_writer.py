"""CSV export writers for generated messages and expenditures."""

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import Any

# Characters that trigger formula execution in spreadsheet applications
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")

MESSAGE_COLUMNS = [
    "batch_id",
    "grouping_hash",
    "body",
    "precincts",
    "num_candidates",
    "num_recipients",
    "cost_per_recipient",
    "total_cost",
    "cost_per_candidate",
    "candidates",
]

EXPENDITURE_COLUMNS = [
    "name",
    "office",
    "total_expenditures",
    "expenditures",
]


def _sanitize_cell(value: object) -> object:
    """Prefix string values starting with a formula character with a single quote."""
    if isinstance(value, str) and value and value[0] in _FORMULA_PREFIXES:
        return f"'{value}"
    return value


def write_csv(
    output_path: Path,
    records: Iterable[dict[str, Any]],
    *,
    columns: list[str],
) -> int:
    """Write records to a CSV file with a header row.

    Fields containing commas, quotes or newlines are double-quoted with
    embedded quotes doubled.  String cells that begin with a spreadsheet
    formula character (``=``, ``+``, ``-``, ``@``, tab, CR) are written with a
    leading ``'`` so they open as text; such values are therefore not
    byte-identical to the stored column.

    Args:
        output_path: Path to write the CSV file.
        records: Iterable of record dicts; keys outside ``columns`` are ignored.
        columns: Column names, in output order.

    Returns:
        Number of records written.
    """
    count = 0

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()

        for record in records:
            sanitized = {k: _sanitize_cell(v) for k, v in record.items()}
            writer.writerow(sanitized)
            count += 1

    return count


def write_recipients_file(output_path: Path, recipients_csv: str) -> None:
    """Write a grouping's pre-serialized ``phone,name`` record set verbatim."""
    with output_path.open("w", newline="", encoding="utf-8") as f:
        f.write(recipients_csv)
