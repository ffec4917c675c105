"""Export service — writes a batch's messages, recipients and expenditures to CSV."""

import json
from pathlib import Path

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.lib.exporter import (
    EXPENDITURE_COLUMNS,
    EXPENDITURES_FILE_NAME,
    MESSAGE_COLUMNS,
    MESSAGES_FILE_NAME,
    MessageExportResult,
    recipients_file_name,
    write_csv,
    write_recipients_file,
)
from voter_outreach.services.expenditure_service import aggregate_expenditures
from voter_outreach.services.message_service import list_messages


async def export_messages(session: AsyncSession, export_dir: Path, batch_id: str = "") -> MessageExportResult:
    """Export one batch to ``export_dir``.

    Writes ``text_messages.csv``, one ``recipients-<grouping_hash>.csv``
    side-car per message and ``candidate_expenditures.csv``.

    Text cells starting with ``=``, ``+``, ``-`` or ``@`` (for example a body
    beginning "-- Vote") are prefixed with ``'`` by the CSV writer; the
    recipient side-cars are written verbatim.

    Args:
        session: Database session.
        export_dir: Output directory, created if missing.
        batch_id: Batch to export.

    Returns:
        MessageExportResult with counts and written paths.
    """
    export_dir.mkdir(parents=True, exist_ok=True)

    messages = await list_messages(session, batch_id)
    messages_path = export_dir / MESSAGES_FILE_NAME
    message_count = write_csv(
        messages_path,
        ({column: getattr(message, column) for column in MESSAGE_COLUMNS} for message in messages),
        columns=MESSAGE_COLUMNS,
    )

    recipient_paths = []
    for message in messages:
        path = export_dir / recipients_file_name(message.grouping_hash)
        write_recipients_file(path, message.recipients)
        recipient_paths.append(path)

    expenditures = await aggregate_expenditures(session, batch_id)
    expenditures_path = export_dir / EXPENDITURES_FILE_NAME
    candidate_count = write_csv(
        expenditures_path,
        (
            {
                "name": name,
                "office": entry.office,
                "total_expenditures": entry.total_expenditures,
                "expenditures": json.dumps(entry.expenditures),
            }
            for name, entry in expenditures.items()
        ),
        columns=EXPENDITURE_COLUMNS,
    )

    logger.info(f"Exported {message_count} messages and {candidate_count} candidates to {export_dir}")
    return MessageExportResult(
        message_count=message_count,
        candidate_count=candidate_count,
        messages_path=messages_path,
        expenditures_path=expenditures_path,
        recipient_paths=recipient_paths,
    )
