"""Equipment aggregation: pack totals, coin conversion, and carrying load.

Content entries may be :class:`~dnd_sheet.models.equipment.PackEntry`
models or their persisted form, plain mappings shaped like
``{"item_id": ..., "quantity": ..., "weight": ..., "value": {"amount": ..., "coin": ...}}``.
Every function here is pure and recomputes from the contents it is given.

Example:
    >>> contents = [
    ...     {"item_id": "rope", "quantity": 1, "weight": 10, "value": {"amount": 1, "coin": "gp"}},
    ...     {"item_id": "torch", "quantity": 10, "weight": 1, "value": {"amount": 1, "coin": "cp"}},
    ... ]
    >>> total_weight(contents)
    20.0
    >>> total_value(contents)
    110
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from dnd_sheet.core.constants import (
    CARRY_CAPACITY_MULTIPLIER,
    DEFAULT_CURRENCY_TABLE,
    ENCUMBERED_MULTIPLIER,
    HEAVILY_ENCUMBERED_MULTIPLIER,
    POWERFUL_BUILD_TRAIT,
    UNKNOWN_COIN_RATE,
)
from dnd_sheet.core.exceptions import EquipmentError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.core.normalizer import normalize_for_lookup, same_key
from dnd_sheet.models.enums import EncumbranceStatus
from dnd_sheet.rules.diagnostics import FallbackDiagnostics


if TYPE_CHECKING:
    from dnd_sheet.models.equipment import Pack


logger = get_logger(__name__)


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _copies(entry: Any) -> int:
    quantity = _field(entry, "quantity")
    return max(quantity or 1, 1)


# =============================================================================
# Pack totals
# =============================================================================


def total_weight(contents: Iterable[Any]) -> float:
    """Sum of ``weight * max(quantity, 1)``; a missing weight counts as 0."""
    return float(sum((_field(entry, "weight") or 0) * _copies(entry) for entry in contents))


def _rate_for(currency_table: Mapping[str, int], coin: str) -> int | None:
    # Table keys compare case-insensitively, like coin codes
    rate = currency_table.get(coin)
    if rate is not None:
        return rate
    for code, code_rate in currency_table.items():
        if normalize_for_lookup(code) == coin:
            return code_rate
    return None


def to_base_unit(
    value: Any,
    currency_table: Mapping[str, int] = DEFAULT_CURRENCY_TABLE,
    diagnostics: FallbackDiagnostics | None = None,
) -> int | float:
    """Convert one ``{amount, coin}`` value to the base unit (copper).

    Coin codes missing from the table convert at a 1:1 rate.

    Args:
        value: A CoinValue, a mapping with ``amount`` and ``coin``, or None.
        currency_table: Coin code to base-unit rate.
        diagnostics: Optional hook told about unknown coin codes.

    Returns:
        The value in base units; 0 for a missing value.
    """
    if value is None:
        return 0
    amount = _field(value, "amount") or 0
    coin = normalize_for_lookup(_field(value, "coin"))
    rate = _rate_for(currency_table, coin)
    if rate is None:
        rate = UNKNOWN_COIN_RATE
        if diagnostics is not None:
            diagnostics.record("unknown_coin", coin)
        else:
            logger.debug("Unknown coin code converted at 1:1", coin=coin)
    return amount * rate


def total_value(
    contents: Iterable[Any],
    currency_table: Mapping[str, int] | None = DEFAULT_CURRENCY_TABLE,
    *,
    pack_id: str | None = None,
    diagnostics: FallbackDiagnostics | None = None,
) -> int | float:
    """Sum of every entry's value in base units times ``max(quantity, 1)``.

    Raises:
        EquipmentError: If ``currency_table`` is None.
    """
    if currency_table is None:
        raise EquipmentError("A currency table is required to total values", pack_id=pack_id)
    return sum(
        to_base_unit(_field(entry, "value"), currency_table, diagnostics) * _copies(entry)
        for entry in contents
    )


def contains_item(contents: Iterable[Any], item_id: str) -> bool:
    return any(_field(entry, "item_id") == item_id for entry in contents)


def item_quantity(contents: Iterable[Any], item_id: str) -> int:
    """Stored quantity of the first matching entry, 1 if unset, 0 if absent."""
    for entry in contents:
        if _field(entry, "item_id") == item_id:
            quantity = _field(entry, "quantity")
            return quantity if quantity is not None else 1
    return 0


# =============================================================================
# Carrying capacity
# =============================================================================


def carrying_capacity(
    strength: int | None,
    traits: Iterable[str] = (),
    multiplier: int = CARRY_CAPACITY_MULTIPLIER,
) -> int:
    """Pounds a character can carry: STR x 15, doubled by Powerful Build.

    A missing strength counts as 10.
    """
    capacity = (strength or 10) * multiplier
    if any(same_key(trait, POWERFUL_BUILD_TRAIT) for trait in traits):
        capacity *= 2
    return capacity


def encumbrance_status(
    weight: float,
    strength: int | None,
    traits: Iterable[str] = (),
    *,
    capacity_multiplier: int = CARRY_CAPACITY_MULTIPLIER,
    encumbered_multiplier: int = ENCUMBERED_MULTIPLIER,
    heavily_encumbered_multiplier: int = HEAVILY_ENCUMBERED_MULTIPLIER,
) -> EncumbranceStatus:
    """Classify a carried weight under the variant encumbrance rule.

    Thresholds are exclusive: carrying exactly STR x 5 pounds is
    unencumbered.
    """
    score = strength or 10
    traits = list(traits)
    if weight > carrying_capacity(score, traits, capacity_multiplier):
        return EncumbranceStatus.OVER_CAPACITY
    if weight > score * heavily_encumbered_multiplier:
        return EncumbranceStatus.HEAVILY_ENCUMBERED
    if weight > score * encumbered_multiplier:
        return EncumbranceStatus.ENCUMBERED
    return EncumbranceStatus.UNENCUMBERED


# =============================================================================
# Pack selection
# =============================================================================


def packs_containing_item(packs: Iterable[Pack], item_id: str) -> list[Pack]:
    return [pack for pack in packs if pack.contains_item(item_id)]


def packs_by_category(packs: Iterable[Pack], category: str) -> list[Pack]:
    return [pack for pack in packs if same_key(pack.category, category)]


def packs_in_price_range(
    packs: Iterable[Pack],
    min_cp: int | float,
    max_cp: int | float,
) -> list[Pack]:
    """Packs whose total value in copper lies within the inclusive range."""
    return [pack for pack in packs if min_cp <= pack.total_value <= max_cp]


def best_pack_for_items(packs: Iterable[Pack], item_ids: Sequence[str]) -> Pack | None:
    """Most cost-effective pack for a shopping list.

    Each pack is scored by its total value divided by how many of the
    needed items it contains; the lowest score wins and earlier packs win
    ties.

    Returns:
        The best pack, or None if no pack holds any needed item.
    """
    best: Pack | None = None
    best_score = float("inf")
    for pack in packs:
        matched = sum(1 for item_id in item_ids if pack.contains_item(item_id))
        if not matched:
            continue
        score = pack.total_value / matched
        if score < best_score:
            best, best_score = pack, score
    return best


__all__ = [
    "total_weight",
    "to_base_unit",
    "total_value",
    "contains_item",
    "item_quantity",
    "carrying_capacity",
    "encumbrance_status",
    "packs_containing_item",
    "packs_by_category",
    "packs_in_price_range",
    "best_pack_for_items",
]
