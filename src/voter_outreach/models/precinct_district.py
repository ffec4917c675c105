"""PrecinctDistrict model — precinct membership in electoral districts."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from voter_outreach.models.base import Base


class PrecinctDistrict(Base):
    """Many-to-many mapping between precincts and the districts they belong to.

    Populated by the external bulk import and replaced wholesale on each
    import run.  District identifiers are opaque and stored as text.
    """

    __tablename__ = "districts"

    precinct: Mapped[str] = mapped_column(String(50), primary_key=True)
    district: Mapped[str] = mapped_column(String(50), primary_key=True)

    __table_args__ = (Index("ix_districts_district", "district"),)
