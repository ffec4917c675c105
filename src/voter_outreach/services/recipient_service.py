"""Recipient resolver — phone numbers and display names for precincts."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.lib.composer import collect_recipients
from voter_outreach.models.voter import Voter
from voter_outreach.services._chunks import chunked


async def get_recipients_for_precincts(session: AsyncSession, precincts: Sequence[str]) -> dict[str, str]:
    """Return the phone -> display name mapping for voters in ``precincts``.

    Voter rows are scanned in import order (ascending id), so a number
    shared by several voters resolves to the last-imported voter's name.

    Args:
        session: Database session.
        precincts: Precinct identifiers.

    Returns:
        Mapping of trimmed phone number to capitalized first name; empty
        for no precincts.
    """
    if not precincts:
        return {}

    rows: list[tuple[int, str | None, str | None, str | None]] = []
    for chunk in chunked(list(precincts)):
        result = await session.execute(
            select(Voter.id, Voter.first_name, Voter.phone_1, Voter.phone_2).where(Voter.precinct.in_(chunk))
        )
        rows.extend(result.tuples().all())

    rows.sort(key=lambda row: row[0])
    return collect_recipients((first_name, phone_1, phone_2) for _, first_name, phone_1, phone_2 in rows)
