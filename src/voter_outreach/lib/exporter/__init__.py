"""Exporter library — public API for message and expenditure export."""

from dataclasses import dataclass, field
from pathlib import Path

from voter_outreach.lib.exporter.csv_writer import (
    EXPENDITURE_COLUMNS,
    MESSAGE_COLUMNS,
    write_csv,
    write_recipients_file,
)

MESSAGES_FILE_NAME = "text_messages.csv"
EXPENDITURES_FILE_NAME = "candidate_expenditures.csv"


def recipients_file_name(grouping_hash: str) -> str:
    """Side-car file name holding one grouping's recipients."""
    return f"recipients-{grouping_hash}.csv"


@dataclass
class MessageExportResult:
    """Result of a message export operation."""

    message_count: int
    candidate_count: int
    messages_path: Path
    expenditures_path: Path
    recipient_paths: list[Path] = field(default_factory=list)


__all__ = [
    "EXPENDITURES_FILE_NAME",
    "EXPENDITURE_COLUMNS",
    "MESSAGES_FILE_NAME",
    "MESSAGE_COLUMNS",
    "MessageExportResult",
    "recipients_file_name",
    "write_csv",
    "write_recipients_file",
]
