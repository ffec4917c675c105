"""Grouping library public API.

Provides canonical district-set encoding, content hashing and the
precinct grouping planner.
"""

from voter_outreach.lib.grouping.encoding import (
    DEFAULT_HASH_LENGTH,
    canonical_districts,
    decode_districts,
    encode_districts,
    grouping_hash,
)
from voter_outreach.lib.grouping.planner import (
    GroupingHashCollisionError,
    GroupingPlan,
    build_groupings,
    relevant_districts,
)

__all__ = [
    "DEFAULT_HASH_LENGTH",
    "GroupingHashCollisionError",
    "GroupingPlan",
    "build_groupings",
    "canonical_districts",
    "decode_districts",
    "encode_districts",
    "grouping_hash",
    "relevant_districts",
]
