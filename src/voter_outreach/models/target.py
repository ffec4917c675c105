"""Target grouping models — precincts collapsed by contested-district profile.

Both tables are derived data, rebuilt wholesale by the grouping service.
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from voter_outreach.models.base import Base


class TargetGroup(Base):
    """One row per distinct relevant-district set.

    ``grouping_hash`` is a short digest of ``districts_json``, the
    canonical encoding of the set, so equal sets always share a row.
    """

    __tablename__ = "target_groupings"

    grouping_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    districts_json: Mapped[str] = mapped_column(Text, nullable=False)


class TargetPrecinct(Base):
    """Assignment of a targeted precinct to exactly one grouping."""

    __tablename__ = "target_precincts"

    precinct: Mapped[str] = mapped_column(String(50), primary_key=True)
    grouping_hash: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("target_groupings.grouping_hash", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
