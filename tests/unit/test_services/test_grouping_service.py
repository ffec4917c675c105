"""Tests for the grouping service."""

from unittest.mock import patch

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.lib.grouping import GroupingHashCollisionError, encode_districts, grouping_hash
from voter_outreach.models import Candidate, TargetGroup, TargetPrecinct
from voter_outreach.services.grouping_service import (
    get_precincts_by_grouping_hash,
    list_groupings,
    rebuild_groupings,
)


async def _snapshot(session: AsyncSession) -> tuple[list[tuple[str, str]], list[tuple[str, str]]]:
    groups = await session.execute(
        select(TargetGroup.grouping_hash, TargetGroup.districts_json).order_by(TargetGroup.grouping_hash)
    )
    precincts = await session.execute(
        select(TargetPrecinct.precinct, TargetPrecinct.grouping_hash).order_by(TargetPrecinct.precinct)
    )
    return list(groups.tuples().all()), list(precincts.tuples().all())


class TestRebuildGroupings:
    """Tests for rebuild_groupings."""

    async def test_single_precinct_single_group(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1", "display_weight": 1}],
            districts=[("P1", "D1")],
        )
        summary = await rebuild_groupings(async_session)

        expected_hash = grouping_hash(encode_districts(["D1"]))
        assert summary.target_districts == ["D1"]
        assert summary.precinct_count == 1
        assert summary.group_count == 1
        assert await _snapshot(async_session) == ([(expected_hash, '["D1"]')], [("P1", expected_hash)])

    async def test_precincts_with_same_profile_share_group(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1"}],
            districts=[("P1", "D1"), ("P2", "D1")],
        )
        await rebuild_groupings(async_session)

        groups, precincts = await _snapshot(async_session)
        assert len(groups) == 1
        assert [p for p, _ in precincts] == ["P1", "P2"]
        assert precincts[0][1] == precincts[1][1] == groups[0][0]

    async def test_non_triggering_contest_splits_groups(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[
                {"name": "Alice", "office": "Mayor", "district": "CITY"},
                {"name": "Bob", "office": "Senate", "district": "SD-40", "triggers_precinct": False},
            ],
            districts=[("P1", "CITY"), ("P2", "CITY"), ("P2", "SD-40"), ("P3", "SD-40")],
        )
        summary = await rebuild_groupings(async_session)

        assert summary.candidate_districts == ["CITY", "SD-40"]
        assert summary.precinct_count == 2
        groupings = dict((h, d) for h, d in await list_groupings(async_session))
        assert sorted(groupings.values()) == [["CITY"], ["CITY", "SD-40"]]

    async def test_no_target_districts_empties_tables(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1"}],
            districts=[("P1", "D1")],
        )
        await rebuild_groupings(async_session)

        assert await async_session.get(TargetGroup, grouping_hash(encode_districts(["D1"]))) is not None

        alice = await async_session.get(Candidate, "Alice")
        alice.unopposed = True
        await async_session.commit()

        summary = await rebuild_groupings(async_session)
        assert summary.group_count == 0
        assert await _snapshot(async_session) == ([], [])

    async def test_rebuild_is_idempotent(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[
                {"name": "Alice", "office": "Mayor", "district": "D1"},
                {"name": "Bob", "office": "Council", "district": "D2"},
            ],
            districts=[("P1", "D1"), ("P2", "D1"), ("P2", "D2"), ("P3", "D2")],
        )
        await rebuild_groupings(async_session)
        first = await _snapshot(async_session)
        await rebuild_groupings(async_session)
        assert await _snapshot(async_session) == first

    async def test_failure_keeps_previous_groupings(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1"}],
            districts=[("P1", "D1")],
        )
        await rebuild_groupings(async_session)
        before = await _snapshot(async_session)

        await seed(districts=[("P2", "D1")])
        with (
            patch("voter_outreach.services.grouping_service.insert", side_effect=RuntimeError("disk full")),
            pytest.raises(RuntimeError, match="disk full"),
        ):
            await rebuild_groupings(async_session)

        assert await _snapshot(async_session) == before

    async def test_hash_length_is_configurable(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1"}],
            districts=[("P1", "D1")],
        )
        await rebuild_groupings(async_session, hash_length=12)
        groups, _ = await _snapshot(async_session)
        assert len(groups[0][0]) == 12

    async def test_hash_collision_aborts_rebuild(self, async_session: AsyncSession, seed) -> None:
        # 17 distinct district sets cannot fit in 16 one-character hashes
        await seed(
            candidates=[{"name": f"C{i}", "office": "Council", "district": f"D{i}"} for i in range(17)],
            districts=[(f"P{i}", f"D{i}") for i in range(17)],
        )
        await rebuild_groupings(async_session)
        before = await _snapshot(async_session)

        with pytest.raises(GroupingHashCollisionError):
            await rebuild_groupings(async_session, hash_length=1)

        assert await _snapshot(async_session) == before


class TestGroupingReads:
    """Tests for list_groupings and get_precincts_by_grouping_hash."""

    async def test_precincts_by_hash(self, async_session: AsyncSession, seed) -> None:
        await seed(
            candidates=[{"name": "Alice", "office": "Mayor", "district": "D1"}],
            districts=[("P2", "D1"), ("P1", "D1")],
        )
        await rebuild_groupings(async_session)
        [(hash_value, districts)] = await list_groupings(async_session)
        assert districts == ["D1"]
        assert await get_precincts_by_grouping_hash(async_session, hash_value) == ["P1", "P2"]

    async def test_unknown_hash(self, async_session: AsyncSession) -> None:
        assert await get_precincts_by_grouping_hash(async_session, "ffffff") == []
