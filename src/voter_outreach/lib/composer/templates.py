"""Message body rendering from ``$placeholder`` templates.

Only the named placeholders are replaced; every other character of a
template, including ``$$`` and unknown ``$words``, is kept verbatim.
"""

import re
from collections.abc import Mapping

_LISTING_PLACEHOLDER = re.compile(r"\$(candidate|office)\b")
_BODY_PLACEHOLDER = re.compile(r"\$listings\b")


def render_listing(listing_template: str, candidate: str, office: str) -> str:
    """Render one candidate listing, substituting ``$candidate`` and ``$office``.

    Substitution is a single pass, so placeholder text inside a candidate
    name or office is not expanded again.
    """
    values = {"candidate": candidate, "office": office}
    return _LISTING_PLACEHOLDER.sub(lambda match: values[match.group(1)], listing_template)


def render_listings(listing_template: str, candidates: Mapping[str, str]) -> str:
    """Concatenate the rendered listing of every candidate, in mapping order.

    Args:
        listing_template: Per-candidate template.
        candidates: Ordered candidate name -> office mapping.

    Returns:
        The joined listings; empty string when there are no candidates.
    """
    return "".join(render_listing(listing_template, name, office) for name, office in candidates.items())


def render_body(txt_template: str, listings: str) -> str:
    """Render the message body, substituting ``$listings``."""
    return _BODY_PLACEHOLDER.sub(lambda _: listings, txt_template)
