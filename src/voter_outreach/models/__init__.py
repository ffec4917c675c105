"""ORM model registry — import all models so Alembic autogenerate discovers them."""

from voter_outreach.models.candidate import Candidate
from voter_outreach.models.precinct_district import PrecinctDistrict
from voter_outreach.models.target import TargetGroup, TargetPrecinct
from voter_outreach.models.text_message import TextMessage
from voter_outreach.models.voter import Voter

__all__ = [
    "Candidate",
    "PrecinctDistrict",
    "TargetGroup",
    "TargetPrecinct",
    "TextMessage",
    "Voter",
]
