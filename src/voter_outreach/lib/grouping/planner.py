"""Partition targeted precincts into groups with identical district profiles.

Pure functions only; the grouping service handles persistence.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from voter_outreach.lib.grouping.encoding import DEFAULT_HASH_LENGTH, encode_districts, grouping_hash


class GroupingHashCollisionError(ValueError):
    """Raised when two different district sets truncate to the same hash."""

    def __init__(self, hash_value: str, existing: str, incoming: str) -> None:
        super().__init__(
            f"Grouping hash {hash_value} already maps to {existing}, cannot reuse it for {incoming}. "
            "Increase grouping_hash_length."
        )
        self.hash_value = hash_value
        self.existing = existing
        self.incoming = incoming


@dataclass
class GroupingPlan:
    """Result of grouping precincts.

    Attributes:
        groups: grouping hash -> canonical district encoding.
        precincts: precinct -> grouping hash.
    """

    groups: dict[str, str] = field(default_factory=dict)
    precincts: dict[str, str] = field(default_factory=dict)

    def add(self, precinct: str, encoded: str, hash_value: str) -> None:
        """Record a precinct's grouping, inserting the group only if absent.

        The first precinct producing a given encoding creates the group;
        later precincts with the same encoding reuse it unchanged.

        Raises:
            GroupingHashCollisionError: If the hash already names a different encoding.
        """
        existing = self.groups.setdefault(hash_value, encoded)
        if existing != encoded:
            raise GroupingHashCollisionError(hash_value, existing, encoded)
        self.precincts[precinct] = hash_value


def relevant_districts(precinct_districts: Iterable[str], candidate_districts: Iterable[str]) -> list[str]:
    """Filter a precinct's districts to those with contested candidates.

    Order of ``precinct_districts`` is preserved.
    """
    allowed = set(candidate_districts)
    return [d for d in precinct_districts if d in allowed]


def build_groupings(
    district_map: Mapping[str, Iterable[str]],
    candidate_districts: Iterable[str],
    *,
    hash_length: int = DEFAULT_HASH_LENGTH,
) -> GroupingPlan:
    """Group precincts by their relevant-district set.

    A precinct whose relevant set is empty still receives a grouping (the
    hash of the empty encoding) and shares it with every other such
    precinct.

    Args:
        district_map: precinct -> all districts the precinct belongs to.
        candidate_districts: Districts with contested candidates, triggering or not.
        hash_length: Hex characters kept from each digest.

    Returns:
        GroupingPlan with one group per distinct relevant-district set.
    """
    allowed = list(candidate_districts)
    plan = GroupingPlan()
    for precinct in sorted(district_map):
        encoded = encode_districts(relevant_districts(district_map[precinct], allowed))
        plan.add(precinct, encoded, grouping_hash(encoded, hash_length))
    return plan
