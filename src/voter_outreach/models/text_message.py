"""TextMessage model — one generated message per grouping per batch."""

from sqlalchemy import Float, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from voter_outreach.models.base import Base, TimestampMixin


class TextMessage(Base, TimestampMixin):
    """Generated outreach message for a target grouping.

    Rows are scoped to ``batch_id``; regenerating a batch replaces all of
    its rows.  ``grouping_hash`` is only meaningful relative to the
    ``target_groupings`` table at generation time, so it carries no
    foreign key.

    Serialized columns:
        precincts   newline-joined precinct identifiers
        candidates  JSON object of candidate name -> office
        recipients  ``phone,name`` CSV text including the header row
    """

    __tablename__ = "text_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_id: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    grouping_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    precincts: Mapped[str] = mapped_column(Text, nullable=False, default="")
    num_candidates: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    num_recipients: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost_per_recipient: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    cost_per_candidate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    candidates: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    recipients: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        UniqueConstraint("batch_id", "grouping_hash", name="uq_text_messages_batch_grouping"),
        Index("ix_text_messages_batch_id", "batch_id"),
    )
    __mapper_args__ = {"eager_defaults": True}  # noqa: RUF012
