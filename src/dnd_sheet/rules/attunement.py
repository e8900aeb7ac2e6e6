"""Attunement ledger.

Tracks which magic items one character is attuned to and enforces the slot
cap. Rejections (full ledger, unknown item, unmet prerequisite) are legal
game states, so :meth:`AttunementLedger.attune` reports them as ``False``
instead of raising. :meth:`AttunementLedger.check` exposes the reason.

The ledger performs no locking. Callers serialize mutations on one
instance; each character session owns its own ledger.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from enum import StrEnum
from typing import Any

from dnd_sheet.core.constants import MAX_ATTUNEMENT_SLOTS
from dnd_sheet.core.exceptions import AttunementError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import CharacterCapabilities
from dnd_sheet.models.items import ItemDefinition
from dnd_sheet.rules.diagnostics import FallbackDiagnostics
from dnd_sheet.rules.prerequisites import satisfies


logger = get_logger(__name__)

ItemLookup = Callable[[str], ItemDefinition | None]
AsyncItemLookup = Callable[[str], Awaitable[ItemDefinition | None]]


class AttunementRejection(StrEnum):
    """Why an attunement attempt was refused."""

    SLOTS_FULL = "slots_full"
    UNKNOWN_ITEM = "unknown_item"
    NOT_REQUIRED = "not_required"
    ALREADY_ATTUNED = "already_attuned"
    PREREQUISITES_UNMET = "prerequisites_unmet"


class AttunementLedger:
    """The set of items a character is attuned to.

    Attributes:
        max_slots: Maximum number of simultaneously attuned items.

    Example:
        >>> ledger = AttunementLedger()
        >>> ledger.attune("cloak-of-protection", catalog.get, character)
        True
        >>> ledger.remaining_slots()
        2
    """

    def __init__(
        self,
        max_slots: int = MAX_ATTUNEMENT_SLOTS,
        *,
        diagnostics: FallbackDiagnostics | None = None,
        log: Any | None = None,
    ) -> None:
        if max_slots < 1:
            raise AttunementError(
                f"max_slots must be at least 1, got {max_slots}",
                details={"max_slots": max_slots},
            )
        self.max_slots = max_slots
        self._diagnostics = diagnostics
        # Owners pass a bound logger so ledger events carry their context
        self._log = log if log is not None else logger
        # dict keys give an insertion-ordered set
        self._attuned: dict[str, None] = {}

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def attuned_ids(self) -> tuple[str, ...]:
        return tuple(self._attuned)

    def is_attuned(self, item_id: str) -> bool:
        return item_id in self._attuned

    def remaining_slots(self) -> int:
        return self.max_slots - len(self._attuned)

    def list_attuned(self, item_lookup: ItemLookup) -> list[ItemDefinition]:
        """Resolve attuned items in ledger order.

        Identifiers the lookup no longer resolves are dropped from the
        result but stay in the ledger.
        """
        resolved = []
        for item_id in self._attuned:
            item = item_lookup(item_id)
            if item is None:
                self._log.debug("Attuned item no longer resolves", item_id=item_id)
                continue
            resolved.append(item)
        return resolved

    def check(
        self,
        item_id: str,
        item_lookup: ItemLookup,
        character: CharacterCapabilities,
    ) -> AttunementRejection | None:
        """Decide whether ``item_id`` may be attuned, without mutating.

        Conditions are checked in a fixed order: slot cap, item lookup,
        attunement requirement, duplicate, prerequisites.

        Returns:
            None if attunement would succeed, otherwise the first reason it
            would be refused.
        """
        if len(self._attuned) >= self.max_slots:
            return AttunementRejection.SLOTS_FULL
        item = item_lookup(item_id)
        if item is None:
            return AttunementRejection.UNKNOWN_ITEM
        if not item.requires_attunement:
            return AttunementRejection.NOT_REQUIRED
        if item_id in self._attuned:
            return AttunementRejection.ALREADY_ATTUNED
        if item.attunement_prerequisites and not satisfies(
            character, item.attunement_prerequisites, self._diagnostics
        ):
            return AttunementRejection.PREREQUISITES_UNMET
        return None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def attune(
        self,
        item_id: str,
        item_lookup: ItemLookup,
        character: CharacterCapabilities,
    ) -> bool:
        """Attune to an item if every rule allows it.

        Returns:
            True if the item was added, False (with no state change) otherwise.
        """
        rejection = self.check(item_id, item_lookup, character)
        if rejection is not None:
            self._log.debug("Attunement refused", item_id=item_id, reason=rejection.value)
            return False
        self._attuned[item_id] = None
        self._log.debug("Attuned item", item_id=item_id, remaining=self.remaining_slots())
        return True

    def release(self, item_id: str) -> bool:
        """End attunement. Returns False if the item was not attuned."""
        if item_id not in self._attuned:
            return False
        del self._attuned[item_id]
        self._log.debug("Released item", item_id=item_id, remaining=self.remaining_slots())
        return True

    def reset(self) -> None:
        """Forget every attunement."""
        self._attuned.clear()

    def restore(
        self,
        saved_ids: Iterable[str],
        item_lookup: ItemLookup,
        character: CharacterCapabilities,
    ) -> list[str]:
        """Rebuild the ledger from a saved list of identifiers.

        The ledger is cleared, then each saved id is attuned in saved order.
        Failures are skipped, so only the first ``max_slots`` valid entries
        take effect.

        Returns:
            The saved ids that could not be restored, in saved order.
        """
        self.reset()
        skipped = [
            item_id for item_id in saved_ids if not self.attune(item_id, item_lookup, character)
        ]
        self._log.info(
            "Attunement restored",
            attuned=list(self._attuned),
            skipped=skipped,
        )
        return skipped

    def export(self) -> list[str]:
        """Attuned ids in ledger order, ready to be saved."""
        return list(self._attuned)

    # -------------------------------------------------------------------------
    # Async boundary
    # -------------------------------------------------------------------------

    async def attune_async(
        self,
        item_id: str,
        item_lookup: AsyncItemLookup,
        character: CharacterCapabilities,
    ) -> bool:
        """Attune using an asynchronous lookup.

        The lookup is awaited first; the ledger logic itself runs
        synchronously, so no other task can interleave with the cap check.
        """
        item = await item_lookup(item_id)
        return self.attune(item_id, {item_id: item}.get, character)

    async def restore_async(
        self,
        saved_ids: Iterable[str],
        item_lookup: AsyncItemLookup,
        character: CharacterCapabilities,
    ) -> list[str]:
        """Restore using an asynchronous lookup (see :meth:`restore`)."""
        ids = list(saved_ids)
        resolved: dict[str, ItemDefinition | None] = {}
        for item_id in ids:
            if item_id not in resolved:
                resolved[item_id] = await item_lookup(item_id)
        return self.restore(ids, resolved.get, character)

    def __len__(self) -> int:
        return len(self._attuned)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._attuned

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._attuned))

    def __repr__(self) -> str:
        return f"AttunementLedger(attuned={list(self._attuned)!r}, max_slots={self.max_slots})"


__all__ = [
    "ItemLookup",
    "AsyncItemLookup",
    "AttunementRejection",
    "AttunementLedger",
]
