"""Per-candidate expenditure accumulation across generated messages."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass
class CandidateExpenditure:
    """Running spend attributed to one candidate.

    ``expenditures`` maps grouping hash -> cost per candidate for each
    message the candidate was listed in.
    """

    office: str
    total_expenditures: float = 0.0
    expenditures: dict[str, float] = field(default_factory=dict)


def accumulate_expenditures(
    messages: Iterable[tuple[str, Mapping[str, str], float]],
) -> dict[str, CandidateExpenditure]:
    """Attribute each message's per-candidate cost to its listed candidates.

    Args:
        messages: ``(grouping_hash, candidates, cost_per_candidate)`` per
            message, where ``candidates`` maps name -> office.

    Returns:
        Candidate name -> CandidateExpenditure.  Candidates that appear in
        no message are absent.
    """
    result: dict[str, CandidateExpenditure] = {}
    for hash_value, candidates, cost_per_candidate in messages:
        for name, office in candidates.items():
            entry = result.setdefault(name, CandidateExpenditure(office=office))
            entry.expenditures[hash_value] = cost_per_candidate
            entry.total_expenditures += cost_per_candidate
    return result
