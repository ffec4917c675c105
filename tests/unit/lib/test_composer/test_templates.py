"""Tests for message template rendering."""

from voter_outreach.core.config import DEFAULT_LISTING_TEMPLATE, DEFAULT_TXT_TEMPLATE
from voter_outreach.lib.composer import render_body, render_listing, render_listings


class TestRenderListing:
    """Tests for render_listing and render_listings."""

    def test_default_listing_template(self) -> None:
        assert render_listing(DEFAULT_LISTING_TEMPLATE, "Alice", "Mayor") == "Alice - Mayor\n"

    def test_listings_follow_mapping_order(self) -> None:
        listings = render_listings("$candidate ($office); ", {"Bea": "Council", "Al": "Mayor"})
        assert listings == "Bea (Council); Al (Mayor); "

    def test_no_candidates_renders_empty(self) -> None:
        assert render_listings(DEFAULT_LISTING_TEMPLATE, {}) == ""

    def test_dollar_in_candidate_name_not_expanded(self) -> None:
        assert render_listing("$candidate - $office", "$office", "Mayor") == "$office - Mayor"


class TestRenderBody:
    """Tests for render_body."""

    def test_substitutes_listings(self) -> None:
        body = render_body(DEFAULT_TXT_TEMPLATE, "Alice - Mayor\n")
        assert body == "Endorsed candidates:\nAlice - Mayor\n\nFor more info, see our website."

    def test_unknown_placeholders_left_intact(self) -> None:
        assert render_body("Vote $listings by $date! Costs $5", "X") == "Vote X by $date! Costs $5"

    def test_double_dollar_kept_verbatim(self) -> None:
        listings = render_listings("$candidate - $office ($$5 min)\n", {"Alice": "Mayor"})
        assert listings == "Alice - Mayor ($$5 min)\n"
        assert render_body("Chip in $$10! $listings", listings) == "Chip in $$10! Alice - Mayor ($$5 min)\n"

    def test_listings_with_backslashes_inserted_literally(self) -> None:
        assert render_body("$listings", r"C:\new \1") == r"C:\new \1"

    def test_longer_placeholder_names_untouched(self) -> None:
        assert render_listing("$candidates $officer $candidate", "Al", "Mayor") == "$candidates $officer Al"
