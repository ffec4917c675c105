"""Recipient list construction and serialization."""

import csv
import io
from collections.abc import Iterable, Mapping

RECIPIENT_COLUMNS = ["phone", "name"]


def capitalize_name(name: str | None) -> str:
    """Upper-case the first character and lower-case the rest."""
    if not name:
        return ""
    return name[:1].upper() + name[1:].lower()


def collect_recipients(rows: Iterable[tuple[str | None, str | None, str | None]]) -> dict[str, str]:
    """Build a phone -> display name mapping from voter rows.

    Each row is ``(first_name, phone_1, phone_2)``.  Both phones are
    trimmed and blanks are skipped.  When a number appears on several
    rows the row scanned last wins; shared household lines therefore keep
    only one name.

    Args:
        rows: Voter rows in scan order.

    Returns:
        Mapping of trimmed phone number to capitalized first name.
    """
    recipients: dict[str, str] = {}
    for first_name, phone_1, phone_2 in rows:
        name = capitalize_name(first_name)
        for phone in (phone_1, phone_2):
            number = (phone or "").strip()
            if number:
                recipients[number] = name
    return recipients


def serialize_recipients(recipients: Mapping[str, str]) -> str:
    """Serialize recipients as ``phone,name`` CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(RECIPIENT_COLUMNS)
    for phone, name in recipients.items():
        writer.writerow([phone, name])
    return buffer.getvalue()


def parse_recipients(text: str) -> dict[str, str]:
    """Parse the output of :func:`serialize_recipients` back into a mapping."""
    reader = csv.DictReader(io.StringIO(text))
    return {row["phone"]: row["name"] for row in reader}
