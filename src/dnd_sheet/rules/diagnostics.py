"""Observability for permissive rule fallbacks.

Two inputs are accepted silently rather than rejected: prerequisite clauses
with an unknown tag (treated as satisfied) and coin codes missing from the
currency table (converted at a 1:1 rate). Neither changes an outcome, but
both usually mean the source data has a typo. A :class:`FallbackDiagnostics`
instance counts every such fallback and logs a warning for it.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Literal

from dnd_sheet.core.logging import get_logger


logger = get_logger(__name__)

FallbackKind = Literal["unrecognized_prerequisite", "unknown_coin"]


class FallbackDiagnostics:
    """Counter of permissive fallbacks, keyed by (kind, value).

    Example:
        >>> diagnostics = FallbackDiagnostics()
        >>> diagnostics.record("unknown_coin", "zz")
        >>> diagnostics.count("unknown_coin")
        1
    """

    def __init__(self, log: Any | None = None) -> None:
        self._counts: Counter[tuple[str, str]] = Counter()
        self._log = log if log is not None else logger

    def record(self, kind: FallbackKind, value: Any, **context: Any) -> None:
        """Count one fallback and log it at warning level."""
        self._counts[(kind, str(value))] += 1
        self._log.warning("Permissive fallback applied", kind=kind, value=value, **context)

    def count(self, kind: FallbackKind | None = None) -> int:
        """Total fallbacks, optionally restricted to one kind."""
        return sum(n for (k, _), n in self._counts.items() if kind is None or k == kind)

    def values(self, kind: FallbackKind) -> dict[str, int]:
        """Per-value counts for one kind, e.g. ``{"zz": 2}``."""
        return {value: n for (k, value), n in self._counts.items() if k == kind}

    def reset(self) -> None:
        self._counts.clear()

    def __bool__(self) -> bool:
        return bool(self._counts)


__all__ = [
    "FallbackKind",
    "FallbackDiagnostics",
]
