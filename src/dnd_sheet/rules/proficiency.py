"""Proficiency list merging and source tracking.

A character's proficiencies are granted piecemeal by class, race,
background and feats, often with overlaps and inconsistent casing. This
module folds those lists into one canonical list, keyed by
:func:`~dnd_sheet.core.normalizer.normalize_for_lookup`.

Two levels of API are provided:

- :func:`merge` and :func:`has` are pure functions over plain string lists,
  used on every recompute.
- :class:`ProficiencyRegistry` remembers which sources granted each
  proficiency so that removing a source (changing background, dropping a
  feat) only removes proficiencies no other source still grants.
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_sheet.core.logging import get_logger
from dnd_sheet.core.normalizer import normalize_for_lookup


logger = get_logger(__name__)


def _sort_key(name: str) -> tuple[str, str]:
    # Case-insensitive order; the raw string breaks ties deterministically
    return (normalize_for_lookup(name), name)


def merge(*lists: Iterable[str] | None) -> list[str]:
    """Merge proficiency lists into one deduplicated, sorted list.

    Lists are consumed in argument order. For each canonical key the
    first-seen spelling is kept (trimmed). Blank and non-string entries
    are skipped.

    Args:
        *lists: Proficiency name lists, e.g. class, race, background.

    Returns:
        Original-cased names sorted case-insensitively.

    Example:
        >>> merge(["Stealth", " stealth ", "Perception"], ["PERCEPTION"])
        ['Perception', 'Stealth']
    """
    first_seen: dict[str, str] = {}
    for entries in lists:
        if not entries:
            continue
        for entry in entries:
            key = normalize_for_lookup(entry)
            if key and key not in first_seen:
                first_seen[key] = entry.strip()
    return sorted(first_seen.values(), key=_sort_key)


def has(proficiencies: Iterable[str] | None, candidate: str | None) -> bool:
    """Check membership by canonical key, ignoring case and whitespace."""
    key = normalize_for_lookup(candidate)
    if not key or not proficiencies:
        return False
    return any(normalize_for_lookup(entry) == key for entry in proficiencies)


class ProficiencyRegistry:
    """Proficiencies of one kind (skills, tools, ...) with their sources.

    Example:
        >>> registry = ProficiencyRegistry()
        >>> registry.add("Stealth", "Rogue")
        True
        >>> registry.add("stealth", "Criminal")
        False
        >>> registry.remove_source("Rogue")
        []
        >>> registry.has("STEALTH")
        True
    """

    def __init__(self) -> None:
        # canonical key -> first-seen display name
        self._names: dict[str, str] = {}
        # canonical key -> {canonical source key: source display name}
        self._sources: dict[str, dict[str, str]] = {}

    def add(self, name: str, source: str) -> bool:
        """Record that ``source`` grants ``name``.

        Returns:
            True if the proficiency was not held before.
        """
        key = normalize_for_lookup(name)
        source_key = normalize_for_lookup(source)
        if not key or not source_key:
            logger.debug("Ignored blank proficiency grant", name=name, source=source)
            return False

        is_new = key not in self._names
        if is_new:
            self._names[key] = name.strip()
        self._sources.setdefault(key, {}).setdefault(source_key, source.strip())
        return is_new

    def add_many(self, names: Iterable[str], source: str) -> list[str]:
        """Add every name from one source; returns the newly gained names."""
        return [name.strip() for name in names if self.add(name, source)]

    def remove_source(self, source: str) -> list[str]:
        """Withdraw a source from every proficiency it granted.

        Returns:
            Names that were lost because no other source grants them.
        """
        source_key = normalize_for_lookup(source)
        lost: list[str] = []
        for key in list(self._sources):
            sources = self._sources[key]
            if sources.pop(source_key, None) is None:
                continue
            if not sources:
                del self._sources[key]
                lost.append(self._names.pop(key))
        if lost:
            logger.debug("Proficiencies removed with source", source=source, lost=lost)
        return sorted(lost, key=_sort_key)

    def has(self, name: str) -> bool:
        return normalize_for_lookup(name) in self._names

    def sources_for(self, name: str) -> set[str]:
        """Display names of every source granting ``name``."""
        return set(self._sources.get(normalize_for_lookup(name), {}).values())

    def names(self) -> list[str]:
        """All held proficiencies, sorted case-insensitively."""
        return sorted(self._names.values(), key=_sort_key)

    def clear(self) -> None:
        self._names.clear()
        self._sources.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def from_sources(cls, by_source: dict[str, list[str]]) -> ProficiencyRegistry:
        """Build a registry from a ``{source: [names]}`` mapping."""
        registry = cls()
        for source, names in by_source.items():
            registry.add_many(names, source)
        return registry


__all__ = [
    "merge",
    "has",
    "ProficiencyRegistry",
]
