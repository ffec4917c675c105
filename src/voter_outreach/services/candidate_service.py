"""Candidate listing builder."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.models.candidate import Candidate


async def list_candidates(session: AsyncSession, districts: Sequence[str]) -> dict[str, str]:
    """Return contested candidates running in ``districts``.

    Candidates are ordered by ascending display weight (name breaks ties).
    A repeated name keeps its first position but the office of the last
    row read.

    Args:
        session: Database session.
        districts: District identifiers.

    Returns:
        Ordered mapping of candidate name -> office; empty for no districts.
    """
    if not districts:
        return {}

    result = await session.execute(
        select(Candidate.name, Candidate.office)
        .where(Candidate.unopposed.is_(False), Candidate.district.in_(list(districts)))
        .order_by(Candidate.display_weight, Candidate.name)
    )
    listings: dict[str, str] = {}
    for name, office in result.all():
        listings[name] = office
    return listings
