"""Enumeration types for the D&D 5E sheet engine.

This module defines the enumeration types used throughout the engine:
ability scores, skills, alignments, passive scores, and encumbrance levels.
"""

from __future__ import annotations

from enum import StrEnum

from dnd_sheet.core.normalizer import normalize_for_lookup


class Ability(StrEnum):
    """D&D 5E ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name

    @classmethod
    def from_name(cls, text: str) -> Ability | None:
        """Resolve 'Wisdom', 'wis' or ' WIS ' to an Ability.

        Returns:
            The matching ability, or None when nothing matches.
        """
        key = normalize_for_lookup(text)
        for ability in cls:
            if key in (ability.value, ability.name.casefold()):
                return ability
        return None


class Skill(StrEnum):
    """D&D 5E skills and their associated abilities.

    Each skill is linked to a primary ability score used
    for skill checks.
    """

    # Strength skills
    ATHLETICS = "athletics"

    # Dexterity skills
    ACROBATICS = "acrobatics"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"

    # Intelligence skills
    ARCANA = "arcana"
    HISTORY = "history"
    INVESTIGATION = "investigation"
    NATURE = "nature"
    RELIGION = "religion"

    # Wisdom skills
    ANIMAL_HANDLING = "animal_handling"
    INSIGHT = "insight"
    MEDICINE = "medicine"
    PERCEPTION = "perception"
    SURVIVAL = "survival"

    # Charisma skills
    DECEPTION = "deception"
    INTIMIDATION = "intimidation"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"

    @property
    def ability(self) -> Ability:
        """Get the primary ability score for this skill.

        Returns:
            The Ability enum value associated with this skill.
        """
        return _SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get the name as printed on a character sheet.

        Returns:
            Display name (e.g., 'Sleight of Hand').
        """
        return _SKILL_DISPLAY_NAMES.get(self, self.value.replace("_", " ").title())

    @classmethod
    def from_name(cls, text: str) -> Skill | None:
        """Resolve a free-text skill name ("sleight of hand", "Sleight_Of_Hand").

        Returns:
            The matching skill, or None when the text names no skill.
        """
        key = normalize_for_lookup(text).replace("_", " ")
        for skill in cls:
            if key == skill.value.replace("_", " "):
                return skill
        return None


_SKILL_ABILITIES: dict[Skill, Ability] = {
    # Strength
    Skill.ATHLETICS: Ability.STR,
    # Dexterity
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    # Intelligence
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    # Wisdom
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    # Charisma
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}

_SKILL_DISPLAY_NAMES: dict[Skill, str] = {
    Skill.SLEIGHT_OF_HAND: "Sleight of Hand",
}


class Alignment(StrEnum):
    """D&D 5E character alignments."""

    LAWFUL_GOOD = "lawful_good"
    NEUTRAL_GOOD = "neutral_good"
    CHAOTIC_GOOD = "chaotic_good"
    LAWFUL_NEUTRAL = "lawful_neutral"
    TRUE_NEUTRAL = "true_neutral"
    CHAOTIC_NEUTRAL = "chaotic_neutral"
    LAWFUL_EVIL = "lawful_evil"
    NEUTRAL_EVIL = "neutral_evil"
    CHAOTIC_EVIL = "chaotic_evil"
    UNALIGNED = "unaligned"

    @property
    def display_name(self) -> str:
        """Get human-readable alignment name.

        Returns:
            Formatted alignment name (e.g., 'Lawful Good').
        """
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, text: str) -> Alignment | None:
        """Parse 'Lawful Good', 'lawful_good', 'LG' or 'neutral'.

        Returns:
            The matching alignment, or None if the text is not an alignment.
        """
        key = normalize_for_lookup(text).replace("_", " ").replace("-", " ")
        if not key:
            return None
        key = " ".join(key.split())
        if key in _ALIGNMENT_ALIASES:
            return _ALIGNMENT_ALIASES[key]
        for alignment in cls:
            if key == alignment.value.replace("_", " "):
                return alignment
        return None


_ALIGNMENT_ALIASES: dict[str, Alignment] = {
    "lg": Alignment.LAWFUL_GOOD,
    "ng": Alignment.NEUTRAL_GOOD,
    "cg": Alignment.CHAOTIC_GOOD,
    "ln": Alignment.LAWFUL_NEUTRAL,
    "n": Alignment.TRUE_NEUTRAL,
    "tn": Alignment.TRUE_NEUTRAL,
    "neutral": Alignment.TRUE_NEUTRAL,
    "cn": Alignment.CHAOTIC_NEUTRAL,
    "le": Alignment.LAWFUL_EVIL,
    "ne": Alignment.NEUTRAL_EVIL,
    "ce": Alignment.CHAOTIC_EVIL,
    "u": Alignment.UNALIGNED,
}


class PassiveKind(StrEnum):
    """Skills that have a passive score printed on the sheet."""

    PERCEPTION = "perception"
    INVESTIGATION = "investigation"
    INSIGHT = "insight"

    @property
    def ability(self) -> Ability:
        """Get the ability a passive score is fixed to."""
        return Skill(self.value).ability


class EncumbranceStatus(StrEnum):
    """Variant encumbrance levels (PHB p.176)."""

    UNENCUMBERED = "unencumbered"
    """Carrying no more than STR x 5 pounds."""

    ENCUMBERED = "encumbered"
    """Speed drops by 10 feet."""

    HEAVILY_ENCUMBERED = "heavily_encumbered"
    """Speed drops by 20 feet; disadvantage on STR/DEX/CON rolls."""

    OVER_CAPACITY = "over_capacity"
    """Carrying more than the character's carrying capacity."""


__all__ = [
    "Ability",
    "Skill",
    "Alignment",
    "PassiveKind",
    "EncumbranceStatus",
]
