"""Per-group cost allocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CostBreakdown:
    """Cost of sending one grouping's message."""

    cost_per_recipient: float
    total_cost: float
    cost_per_candidate: float


def compute_costs(cost_per_recipient: float, num_recipients: int, num_candidates: int) -> CostBreakdown:
    """Compute total and per-candidate cost for a grouping.

    The total is split evenly across the candidates listed in the message.
    A grouping without candidates has a per-candidate cost of 0.

    Args:
        cost_per_recipient: Configured price per recipient.
        num_recipients: Distinct phone numbers in the grouping.
        num_candidates: Candidates listed in the message body.

    Returns:
        CostBreakdown for the grouping.
    """
    total_cost = cost_per_recipient * num_recipients
    cost_per_candidate = total_cost / num_candidates if num_candidates > 0 else 0.0
    return CostBreakdown(
        cost_per_recipient=cost_per_recipient,
        total_cost=total_cost,
        cost_per_candidate=cost_per_candidate,
    )
