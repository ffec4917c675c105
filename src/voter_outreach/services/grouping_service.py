"""Grouping service — rebuilds the target precinct groupings.

Precincts touched by a triggering contest are collapsed into groups that
share an identical set of contested districts, so one message body can
serve every precinct in a group.
"""

from dataclasses import dataclass, field

from loguru import logger
from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.lib.grouping import DEFAULT_HASH_LENGTH, build_groupings, decode_districts
from voter_outreach.models.base import Base
from voter_outreach.models.target import TargetGroup, TargetPrecinct
from voter_outreach.services.district_service import (
    get_districts_by_precinct,
    get_precincts_in_districts,
    get_target_districts,
)


@dataclass
class GroupingSummary:
    """Outcome of a grouping rebuild."""

    target_districts: list[str] = field(default_factory=list)
    candidate_districts: list[str] = field(default_factory=list)
    precinct_count: int = 0
    group_count: int = 0


async def ensure_grouping_tables(session: AsyncSession) -> None:
    """Create the target grouping tables if they do not exist."""
    conn = await session.connection()
    await conn.run_sync(
        Base.metadata.create_all,
        tables=[TargetGroup.__table__, TargetPrecinct.__table__],
        checkfirst=True,
    )


async def rebuild_groupings(session: AsyncSession, *, hash_length: int = DEFAULT_HASH_LENGTH) -> GroupingSummary:
    """Recompute every precinct grouping from the current source tables.

    All prior grouping rows are replaced inside a single transaction; on
    any failure the transaction is rolled back and the previous groupings
    remain.

    Args:
        session: Database session.
        hash_length: Hex characters kept from each grouping digest.

    Returns:
        GroupingSummary describing the new groupings.

    Raises:
        GroupingHashCollisionError: If two district sets share a truncated hash.
    """
    await ensure_grouping_tables(session)

    try:
        target_districts = await get_target_districts(session)
        candidate_districts = await get_target_districts(session, include_non_triggering=True)
        logger.info(
            f"Rebuilding groupings: {len(target_districts)} triggering districts, "
            f"{len(candidate_districts)} contested districts"
        )

        precincts = await get_precincts_in_districts(session, target_districts)
        district_map = await get_districts_by_precinct(session, precincts)
        plan = build_groupings(district_map, candidate_districts, hash_length=hash_length)

        await session.execute(delete(TargetPrecinct))
        await session.execute(delete(TargetGroup))
        if plan.groups:
            await session.execute(
                insert(TargetGroup),
                [{"grouping_hash": h, "districts_json": encoded} for h, encoded in plan.groups.items()],
            )
            await session.execute(
                insert(TargetPrecinct),
                [{"precinct": p, "grouping_hash": h} for p, h in plan.precincts.items()],
            )
        await session.commit()
    except Exception:
        await session.rollback()
        logger.exception("Grouping rebuild failed, previous groupings kept")
        raise

    logger.bind(json_output=True, precinct_count=len(plan.precincts), group_count=len(plan.groups)).info(
        f"Grouped {len(plan.precincts)} precincts into {len(plan.groups)} groupings"
    )
    return GroupingSummary(
        target_districts=target_districts,
        candidate_districts=candidate_districts,
        precinct_count=len(plan.precincts),
        group_count=len(plan.groups),
    )


async def list_groupings(session: AsyncSession) -> list[tuple[str, list[str]]]:
    """Return every grouping as ``(grouping_hash, districts)``, ordered by hash."""
    await ensure_grouping_tables(session)
    result = await session.execute(select(TargetGroup).order_by(TargetGroup.grouping_hash))
    return [(group.grouping_hash, decode_districts(group.districts_json)) for group in result.scalars().all()]


async def get_precincts_by_grouping_hash(session: AsyncSession, grouping_hash: str) -> list[str]:
    """Return the precincts assigned to a grouping, ascending."""
    result = await session.execute(
        select(TargetPrecinct.precinct)
        .where(TargetPrecinct.grouping_hash == grouping_hash)
        .order_by(TargetPrecinct.precinct)
    )
    return list(result.scalars().all())
