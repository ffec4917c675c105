"""Message service — composes one outreach message per target grouping.

Each grouping is composed in its own task; the tasks share the caller's
session, so every storage call is serialized through an ``asyncio.Lock``
while template rendering and cost math run freely.
"""

import asyncio
import json
from dataclasses import dataclass, field

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_outreach.core.config import DEFAULT_LISTING_TEMPLATE, DEFAULT_TXT_TEMPLATE
from voter_outreach.lib.composer import compute_costs, render_body, render_listings, serialize_recipients
from voter_outreach.lib.grouping import decode_districts
from voter_outreach.models.base import Base
from voter_outreach.models.target import TargetGroup
from voter_outreach.models.text_message import TextMessage
from voter_outreach.services.candidate_service import list_candidates
from voter_outreach.services.grouping_service import ensure_grouping_tables, get_precincts_by_grouping_hash
from voter_outreach.services.recipient_service import get_recipients_for_precincts


@dataclass
class GenerationResult:
    """Outcome of generating a message batch.

    ``failed`` maps the grouping hash of every group that could not be
    composed to its error message.
    """

    batch_id: str
    messages: list[TextMessage] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.failed


async def ensure_message_table(session: AsyncSession) -> None:
    """Create the ``text_messages`` table if it does not exist."""
    conn = await session.connection()
    await conn.run_sync(Base.metadata.create_all, tables=[TextMessage.__table__], checkfirst=True)


async def _compose_message(
    session: AsyncSession,
    lock: asyncio.Lock,
    group: TargetGroup,
    *,
    batch_id: str,
    cost_per_recipient: float,
    txt_template: str,
    listing_template: str,
) -> TextMessage:
    """Build the message row for a single grouping."""
    districts = decode_districts(group.districts_json)

    async with lock:
        candidates = await list_candidates(session, districts)
        precincts = await get_precincts_by_grouping_hash(session, group.grouping_hash)
        recipients = await get_recipients_for_precincts(session, precincts)

    body = render_body(txt_template, render_listings(listing_template, candidates))
    costs = compute_costs(cost_per_recipient, len(recipients), len(candidates))
    logger.debug(
        f"Grouping {group.grouping_hash}: {len(candidates)} candidates, "
        f"{len(precincts)} precincts, {len(recipients)} recipients"
    )

    return TextMessage(
        batch_id=batch_id,
        grouping_hash=group.grouping_hash,
        body=body,
        precincts="\n".join(precincts),
        num_candidates=len(candidates),
        num_recipients=len(recipients),
        cost_per_recipient=costs.cost_per_recipient,
        total_cost=costs.total_cost,
        cost_per_candidate=costs.cost_per_candidate,
        candidates=json.dumps(candidates),
        recipients=serialize_recipients(recipients),
    )


async def generate_messages(
    session: AsyncSession,
    batch_id: str = "",
    *,
    cost_per_recipient: float = 0.0,
    txt_template: str = DEFAULT_TXT_TEMPLATE,
    listing_template: str = DEFAULT_LISTING_TEMPLATE,
) -> GenerationResult:
    """Generate (or regenerate) the messages of a batch.

    Existing rows of ``batch_id`` are deleted first, so running the same
    batch twice leaves one row per grouping.  Other batches are untouched.
    A grouping that fails to compose is logged and reported in the result;
    the remaining groupings are still stored.

    Args:
        session: Database session.
        batch_id: Batch identifier.
        cost_per_recipient: Price per recipient used for cost allocation.
        txt_template: Message template containing ``$listings``.
        listing_template: Per-candidate template with ``$candidate`` and ``$office``.

    Returns:
        GenerationResult with the stored messages and any per-group failures.
    """
    await ensure_message_table(session)
    await ensure_grouping_tables(session)

    with logger.contextualize(batch=batch_id or "''"):
        return await _generate_batch(session, batch_id, cost_per_recipient, txt_template, listing_template)


async def _generate_batch(
    session: AsyncSession,
    batch_id: str,
    cost_per_recipient: float,
    txt_template: str,
    listing_template: str,
) -> GenerationResult:
    try:
        await session.execute(delete(TextMessage).where(TextMessage.batch_id == batch_id))
        result = await session.execute(select(TargetGroup).order_by(TargetGroup.grouping_hash))
        groups = list(result.scalars().all())
        logger.info(f"Generating batch '{batch_id}' for {len(groups)} groupings")

        lock = asyncio.Lock()
        outcomes = await asyncio.gather(
            *(
                _compose_message(
                    session,
                    lock,
                    group,
                    batch_id=batch_id,
                    cost_per_recipient=cost_per_recipient,
                    txt_template=txt_template,
                    listing_template=listing_template,
                )
                for group in groups
            ),
            return_exceptions=True,
        )

        generation = GenerationResult(batch_id=batch_id)
        for group, outcome in zip(groups, outcomes, strict=True):
            if isinstance(outcome, Exception):
                logger.opt(exception=outcome).error(f"Message generation failed for grouping {group.grouping_hash}")
                generation.failed[group.grouping_hash] = str(outcome)
            else:
                generation.messages.append(outcome)

        session.add_all(generation.messages)
        await session.commit()
    except Exception:
        await session.rollback()
        logger.exception(f"Message generation for batch '{batch_id}' failed")
        raise

    logger.bind(
        json_output=True,
        batch_id=batch_id,
        message_count=len(generation.messages),
        failed_groupings=sorted(generation.failed),
        total_cost=sum(message.total_cost for message in generation.messages),
    ).info(
        f"Batch '{batch_id}': stored {len(generation.messages)} messages, {len(generation.failed)} groupings failed"
    )
    return generation


async def list_messages(session: AsyncSession, batch_id: str | None = None) -> list[TextMessage]:
    """Return stored messages, optionally restricted to one batch.

    Args:
        session: Database session.
        batch_id: Batch to read; None reads every batch.

    Returns:
        Messages ordered by batch then grouping hash.
    """
    await ensure_message_table(session)
    query = select(TextMessage)
    if batch_id is not None:
        query = query.where(TextMessage.batch_id == batch_id)
    result = await session.execute(query.order_by(TextMessage.batch_id, TextMessage.grouping_hash))
    return list(result.scalars().all())
