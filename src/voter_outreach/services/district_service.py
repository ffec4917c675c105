"""District resolver — precinct membership and targetable districts."""

from collections.abc import Sequence

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.models.candidate import Candidate
from voter_outreach.models.precinct_district import PrecinctDistrict
from voter_outreach.services._chunks import chunked


async def get_precinct_districts(session: AsyncSession, precinct: str) -> list[str]:
    """Return every district a precinct belongs to, ascending.

    Args:
        session: Database session.
        precinct: Precinct identifier.

    Returns:
        Distinct district identifiers; empty if the precinct is unknown.
    """
    result = await session.execute(
        select(PrecinctDistrict.district)
        .where(PrecinctDistrict.precinct == precinct)
        .distinct()
        .order_by(PrecinctDistrict.district)
    )
    return list(result.scalars().all())


async def get_districts_by_precinct(session: AsyncSession, precincts: Sequence[str]) -> dict[str, list[str]]:
    """Bulk form of :func:`get_precinct_districts`.

    Args:
        session: Database session.
        precincts: Precinct identifiers.

    Returns:
        Mapping of each requested precinct to its ascending district list.
        Precincts without membership rows map to an empty list.
    """
    district_map: dict[str, list[str]] = {p: [] for p in precincts}
    for chunk in chunked(list(district_map)):
        result = await session.execute(
            select(PrecinctDistrict.precinct, PrecinctDistrict.district)
            .where(PrecinctDistrict.precinct.in_(chunk))
            .distinct()
            .order_by(PrecinctDistrict.precinct, PrecinctDistrict.district)
        )
        for precinct, district in result.all():
            district_map[precinct].append(district)
    return district_map


async def get_target_districts(session: AsyncSession, *, include_non_triggering: bool = False) -> list[str]:
    """Return districts with a contested endorsed candidate, ascending.

    Args:
        session: Database session.
        include_non_triggering: Also include contested districts whose
            candidates do not trigger precinct targeting.  The narrow set
            picks which precincts are targeted; the wide set picks which of
            a targeted precinct's districts are worth mentioning.

    Returns:
        Distinct district identifiers.
    """
    query = select(Candidate.district).where(Candidate.unopposed.is_(False))
    if not include_non_triggering:
        query = query.where(Candidate.triggers_precinct.is_(True))
    result = await session.execute(query.distinct().order_by(Candidate.district))
    return list(result.scalars().all())


async def get_precincts_in_districts(session: AsyncSession, districts: Sequence[str]) -> list[str]:
    """Return distinct precincts belonging to at least one of ``districts``, ascending."""
    if not districts:
        return []
    precincts: set[str] = set()
    for chunk in chunked(list(districts)):
        result = await session.execute(
            select(PrecinctDistrict.precinct).where(PrecinctDistrict.district.in_(chunk)).distinct()
        )
        precincts.update(result.scalars().all())
    return sorted(precincts)


async def get_target_precincts(session: AsyncSession) -> list[str]:
    """Return precincts in at least one triggering district, ascending."""
    target_districts = await get_target_districts(session)
    if not target_districts:
        logger.info("No target districts found")
        return []
    return await get_precincts_in_districts(session, target_districts)
