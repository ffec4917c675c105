"""Tests for the recipient resolver service."""

from unittest.mock import AsyncMock

from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.services.recipient_service import get_recipients_for_precincts


class TestGetRecipientsForPrecincts:
    """Tests for get_recipients_for_precincts."""

    async def test_collects_both_phones(self, async_session: AsyncSession, seed) -> None:
        await seed(
            voters=[
                {"precinct": "P1", "first_name": "bob", "phone_1": "555-1111", "phone_2": ""},
                {"precinct": "P1", "first_name": "ANN", "phone_1": " 555-2222 ", "phone_2": "555-3333"},
                {"precinct": "P2", "first_name": "cy", "phone_1": "555-4444", "phone_2": None},
            ]
        )
        result = await get_recipients_for_precincts(async_session, ["P1"])
        assert result == {"555-1111": "Bob", "555-2222": "Ann", "555-3333": "Ann"}

    async def test_shared_number_keeps_last_imported_voter(self, async_session: AsyncSession, seed) -> None:
        await seed(
            voters=[
                {"precinct": "P2", "first_name": "ann", "phone_1": "555-1111"},
                {"precinct": "P1", "first_name": "bob", "phone_1": "555-1111"},
            ]
        )
        assert await get_recipients_for_precincts(async_session, ["P1", "P2"]) == {"555-1111": "Bob"}

    async def test_voters_without_phones(self, async_session: AsyncSession, seed) -> None:
        await seed(voters=[{"precinct": "P1", "first_name": "dee", "phone_1": None, "phone_2": "   "}])
        assert await get_recipients_for_precincts(async_session, ["P1"]) == {}

    async def test_empty_precincts_skip_storage(self) -> None:
        session = AsyncMock()
        assert await get_recipients_for_precincts(session, []) == {}
        session.execute.assert_not_awaited()
