"""Voter model — the slice of the registration file needed for outreach."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from voter_outreach.models.base import Base


class Voter(Base):
    """Registered voter with up to two contact phone numbers."""

    __tablename__ = "voters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    precinct: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_1: Mapped[str | None] = mapped_column(String(30), nullable=True)
    phone_2: Mapped[str | None] = mapped_column(String(30), nullable=True)
