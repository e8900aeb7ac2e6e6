"""Rules constants for the D&D 5E sheet engine.

This module defines the default values of the rules the engine enforces.
Values that tables commonly house-rule are also exposed through
``dnd_sheet.core.config.RulesSettings``.
"""

from __future__ import annotations

from types import MappingProxyType

# =============================================================================
# Attunement (DMG p.136)
# =============================================================================

MAX_ATTUNEMENT_SLOTS = 3
"""Maximum number of magic items a character can be attuned to at once."""

# =============================================================================
# Currency (PHB p.143)
# =============================================================================

BASE_COIN = "cp"
"""The smallest denomination; all values are normalized to it."""

DEFAULT_CURRENCY_TABLE = MappingProxyType(
    {
        "cp": 1,
        "sp": 10,
        "ep": 50,
        "gp": 100,
        "pp": 1000,
    }
)
"""Coin code to copper-piece conversion rates."""

UNKNOWN_COIN_RATE = 1
"""Rate applied to coin codes missing from the currency table."""

# =============================================================================
# Carrying Capacity (PHB p.176)
# =============================================================================

CARRY_CAPACITY_MULTIPLIER = 15
"""Carrying capacity in pounds per point of Strength."""

ENCUMBERED_MULTIPLIER = 5
"""Variant encumbrance: encumbered above STR x 5 pounds."""

HEAVILY_ENCUMBERED_MULTIPLIER = 10
"""Variant encumbrance: heavily encumbered above STR x 10 pounds."""

POWERFUL_BUILD_TRAIT = "Powerful Build"
"""Racial trait that counts the character as one size larger for capacity."""

# =============================================================================
# Proficiency (PHB p.15)
# =============================================================================

PASSIVE_BASE = 10
"""Base value added to a skill modifier for passive scores."""

MIN_PROFICIENCY_BONUS = 2
"""Proficiency bonus for level 1 characters (and invalid levels)."""

PROFICIENCY_BONUS_BY_LEVEL = ((17, 6), (13, 5), (9, 4), (5, 3))
"""(minimum level, bonus) pairs, highest first."""

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""


__all__ = [
    # Attunement
    "MAX_ATTUNEMENT_SLOTS",
    # Currency
    "BASE_COIN",
    "DEFAULT_CURRENCY_TABLE",
    "UNKNOWN_COIN_RATE",
    # Carrying capacity
    "CARRY_CAPACITY_MULTIPLIER",
    "ENCUMBERED_MULTIPLIER",
    "HEAVILY_ENCUMBERED_MULTIPLIER",
    "POWERFUL_BUILD_TRAIT",
    # Proficiency
    "PASSIVE_BASE",
    "MIN_PROFICIENCY_BONUS",
    "PROFICIENCY_BONUS_BY_LEVEL",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
]
