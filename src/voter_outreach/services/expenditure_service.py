"""Expenditure service — per-candidate spend derived from stored messages."""

import json

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.lib.composer import CandidateExpenditure, accumulate_expenditures
from voter_outreach.services.message_service import list_messages


async def aggregate_expenditures(session: AsyncSession, batch_id: str = "") -> dict[str, CandidateExpenditure]:
    """Total each candidate's share of a batch's message costs.

    Aggregation is scoped to a single batch: grouping hashes are only
    unique within a batch, so mixing batches would overwrite per-group
    entries while still summing their totals.

    Args:
        session: Database session.
        batch_id: Batch whose messages are aggregated.

    Returns:
        Candidate name -> CandidateExpenditure.  Candidates listed in no
        message of the batch are absent.
    """
    messages = await list_messages(session, batch_id)
    expenditures = accumulate_expenditures(
        (message.grouping_hash, json.loads(message.candidates), message.cost_per_candidate) for message in messages
    )
    logger.info(f"Aggregated expenditures for {len(expenditures)} candidates across {len(messages)} messages")
    return expenditures
