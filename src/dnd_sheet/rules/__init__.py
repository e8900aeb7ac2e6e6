"""Rules engine: pure D&D 5E rules over character and item data.

Modules:
    normalizer: Canonical lookup keys for free-text names.
    modifiers: Skill, saving throw, and passive score arithmetic.
    proficiency: Proficiency merging and source tracking.
    prerequisites: Attunement prerequisite evaluation.
    attunement: The per-character attunement ledger.
    equipment: Pack totals, currency conversion, carrying load.
    diagnostics: Counters for permissive fallbacks.
"""

from __future__ import annotations

from dnd_sheet.rules.attunement import (
    AsyncItemLookup,
    AttunementLedger,
    AttunementRejection,
    ItemLookup,
)
from dnd_sheet.rules.diagnostics import FallbackDiagnostics
from dnd_sheet.rules.equipment import (
    best_pack_for_items,
    carrying_capacity,
    contains_item,
    encumbrance_status,
    item_quantity,
    packs_by_category,
    packs_containing_item,
    packs_in_price_range,
    to_base_unit,
    total_value,
    total_weight,
)
from dnd_sheet.rules.modifiers import (
    PASSIVE_ABILITIES,
    ability_modifier,
    format_signed,
    passive_score,
    proficiency_bonus_for_level,
    saving_throw_modifier,
    skill_modifier,
)
from dnd_sheet.rules.normalizer import normalize_for_lookup
from dnd_sheet.rules.prerequisites import (
    clause_holds,
    parse_prerequisite,
    parse_prerequisites,
    satisfies,
    unmet_prerequisites,
)
from dnd_sheet.rules.proficiency import ProficiencyRegistry, has, merge


__all__ = [
    # Normalizer
    "normalize_for_lookup",
    # Modifiers
    "PASSIVE_ABILITIES",
    "ability_modifier",
    "proficiency_bonus_for_level",
    "skill_modifier",
    "saving_throw_modifier",
    "passive_score",
    "format_signed",
    # Proficiency
    "merge",
    "has",
    "ProficiencyRegistry",
    # Prerequisites
    "clause_holds",
    "satisfies",
    "unmet_prerequisites",
    "parse_prerequisite",
    "parse_prerequisites",
    # Attunement
    "ItemLookup",
    "AsyncItemLookup",
    "AttunementRejection",
    "AttunementLedger",
    # Equipment
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
    # Diagnostics
    "FallbackDiagnostics",
]
