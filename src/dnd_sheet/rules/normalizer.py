"""Lookup-key normalization used by every rules component.

Re-exported from :mod:`dnd_sheet.core.normalizer` so that models, which
must not import the rules package, share the same implementation.
"""

from __future__ import annotations

from dnd_sheet.core.normalizer import normalize_for_lookup, normalize_many, same_key


__all__ = [
    "normalize_for_lookup",
    "normalize_many",
    "same_key",
]
