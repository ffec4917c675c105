"""Candidate model — endorsed candidates and the contests they run in."""

from sqlalchemy import Boolean, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from voter_outreach.models.base import Base


class Candidate(Base):
    """Endorsed candidate for a single office in a single district.

    ``unopposed`` candidates are never advertised.  ``triggers_precinct``
    marks contests that cause precincts to be targeted at all; contested
    non-triggering candidates are still listed in messages for precincts
    targeted by some other race.
    """

    __tablename__ = "candidates"

    name: Mapped[str] = mapped_column(String(200), primary_key=True)
    office: Mapped[str] = mapped_column(String(200), nullable=False)
    district: Mapped[str] = mapped_column(String(50), nullable=False)
    unopposed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    triggers_precinct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    __table_args__ = (Index("ix_candidates_district", "district"),)
