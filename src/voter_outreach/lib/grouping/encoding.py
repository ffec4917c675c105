"""Canonical district-set encoding and content hashing."""

import hashlib
import json
from collections.abc import Iterable

DEFAULT_HASH_LENGTH = 6


def canonical_districts(districts: Iterable[object]) -> list[str]:
    """Return the de-duplicated, stringified, ascending form of a district set."""
    return sorted({str(d) for d in districts})


def encode_districts(districts: Iterable[object]) -> str:
    """Encode a district set as a compact JSON array.

    Any permutation (or repetition) of the same districts produces the
    same string, which makes the encoding safe to hash.

    Args:
        districts: District identifiers in any order.

    Returns:
        The canonical JSON encoding, e.g. ``["D1","D2"]``.
    """
    return json.dumps(canonical_districts(districts), separators=(",", ":"))


def decode_districts(encoded: str) -> list[str]:
    """Decode a district set produced by :func:`encode_districts`.

    Raises:
        ValueError: If the value is not a JSON array.
    """
    value = json.loads(encoded)
    if not isinstance(value, list):
        msg = f"Encoded districts must be a JSON array, got {type(value).__name__}"
        raise ValueError(msg)
    return [str(d) for d in value]


def grouping_hash(encoded: str, length: int = DEFAULT_HASH_LENGTH) -> str:
    """Short SHA-256 hex digest of a canonical district encoding.

    Args:
        encoded: Output of :func:`encode_districts`.
        length: Number of leading hex characters to keep (1-64).

    Returns:
        The truncated lowercase hex digest.
    """
    if not 1 <= length <= 64:
        msg = f"Hash length must be between 1 and 64, got {length}"
        raise ValueError(msg)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()[:length]
