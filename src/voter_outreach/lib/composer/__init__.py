"""Composer library public API.

Provides message template rendering, recipient list handling, cost
allocation and expenditure accumulation.
"""

from voter_outreach.lib.composer.costs import CostBreakdown, compute_costs
from voter_outreach.lib.composer.expenditures import CandidateExpenditure, accumulate_expenditures
from voter_outreach.lib.composer.recipients import (
    RECIPIENT_COLUMNS,
    capitalize_name,
    collect_recipients,
    parse_recipients,
    serialize_recipients,
)
from voter_outreach.lib.composer.templates import render_body, render_listing, render_listings

__all__ = [
    "RECIPIENT_COLUMNS",
    "CandidateExpenditure",
    "CostBreakdown",
    "accumulate_expenditures",
    "capitalize_name",
    "collect_recipients",
    "compute_costs",
    "parse_recipients",
    "render_body",
    "render_listing",
    "render_listings",
    "serialize_recipients",
]
