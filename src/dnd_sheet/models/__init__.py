"""Pydantic V2 data models for the D&D 5E sheet engine.

Modules:
    enums: Abilities, skills, alignments, passive kinds, encumbrance.
    prerequisites: Attunement prerequisite clauses and their parser.
    items: Item definitions and coin values.
    equipment: Equipment packs with computed totals.
    character: Character profile and the capability protocol.
    sheet: The derived sheet view model.
"""

from __future__ import annotations

from dnd_sheet.models.character import (
    AbilityScores,
    CharacterCapabilities,
    CharacterProfile,
    ClassLevel,
)
from dnd_sheet.models.enums import (
    Ability,
    Alignment,
    EncumbranceStatus,
    PassiveKind,
    Skill,
)
from dnd_sheet.models.equipment import Pack, PackEntry
from dnd_sheet.models.items import CoinValue, ItemDefinition
from dnd_sheet.models.prerequisites import (
    AlignmentRequirement,
    ClassRequirement,
    PrerequisiteClause,
    RaceRequirement,
    SpellcasterRequirement,
    UnrecognizedRequirement,
    parse_prerequisite,
    parse_prerequisites,
)
from dnd_sheet.models.sheet import DerivedSheet, SaveLine, SkillLine


__all__ = [
    # Enums
    "Ability",
    "Skill",
    "Alignment",
    "PassiveKind",
    "EncumbranceStatus",
    # Prerequisites
    "PrerequisiteClause",
    "ClassRequirement",
    "SpellcasterRequirement",
    "AlignmentRequirement",
    "RaceRequirement",
    "UnrecognizedRequirement",
    "parse_prerequisite",
    "parse_prerequisites",
    # Items & equipment
    "CoinValue",
    "ItemDefinition",
    "PackEntry",
    "Pack",
    # Character
    "CharacterCapabilities",
    "ClassLevel",
    "AbilityScores",
    "CharacterProfile",
    # Sheet
    "SkillLine",
    "SaveLine",
    "DerivedSheet",
]
