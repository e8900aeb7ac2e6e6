"""Canonical lookup keys for free-text rules data.

Rule-book data and user input disagree on casing and stray whitespace
("Stealth", " stealth ", "STEALTH"). Every comparison of proficiency, class,
race, or source names goes through :func:`normalize_for_lookup` so that
these variants compare equal. Keys keep their inner spaces, so
"Animal Handling" becomes "animal handling".
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def normalize_for_lookup(text: Any) -> str:
    """Return the canonical lookup key for a piece of text.

    Args:
        text: Raw text. Non-string values (including None) normalize to "".

    Returns:
        The trimmed, case-folded key.

    Example:
        >>> normalize_for_lookup("  Sleight of Hand ")
        'sleight of hand'
    """
    if not isinstance(text, str):
        return ""
    return text.strip().casefold()


def normalize_many(values: Iterable[Any] | None) -> list[str]:
    """Normalize every value, dropping entries that normalize to ""."""
    if not values:
        return []
    keys = (normalize_for_lookup(value) for value in values)
    return [key for key in keys if key]


def same_key(left: Any, right: Any) -> bool:
    """Check whether two values share a non-empty canonical key."""
    key = normalize_for_lookup(left)
    return bool(key) and key == normalize_for_lookup(right)


__all__ = [
    "normalize_for_lookup",
    "normalize_many",
    "same_key",
]
