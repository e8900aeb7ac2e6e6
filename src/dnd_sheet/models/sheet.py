"""Derived view model returned to the UI layer.

Everything here is computed by :mod:`dnd_sheet.engine.session`; none of it
is authoritative and all of it is rebuilt on every derivation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dnd_sheet.models.enums import Ability, EncumbranceStatus, PassiveKind, Skill


class SkillLine(BaseModel):
    """One row of the skills block."""

    model_config = ConfigDict(frozen=True)

    skill: Skill
    ability: Ability
    modifier: int
    display: str = Field(description="Signed modifier, e.g. '+5'")
    proficient: bool = False
    expertise: bool = False


class SaveLine(BaseModel):
    """One row of the saving throws block."""

    model_config = ConfigDict(frozen=True)

    ability: Ability
    modifier: int
    display: str
    proficient: bool = False


class DerivedSheet(BaseModel):
    """The numeric and legal state derived from a character profile.

    Attributes:
        name: Character name.
        level: Total character level.
        proficiency_bonus: Level-derived proficiency bonus.
        ability_modifiers: Modifier per ability.
        skills: Skill rows in skill order.
        saving_throws: Saving throw rows in ability order.
        passive_scores: Passive perception, investigation, insight.
        skill_proficiencies: Merged skill proficiency names.
        other_proficiencies: Merged tool/weapon/armor/language names.
        attuned: Attuned item ids in ledger order.
        attunement_slots_remaining: Free attunement slots.
        carried_weight: Weight of the supplied equipment in pounds.
        carried_value: Value of the supplied equipment in base units.
        carrying_capacity: Carrying capacity in pounds.
        encumbrance: Variant encumbrance status.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    level: int
    proficiency_bonus: int
    ability_modifiers: dict[Ability, int]
    skills: list[SkillLine]
    saving_throws: list[SaveLine]
    passive_scores: dict[PassiveKind, int]
    skill_proficiencies: list[str]
    other_proficiencies: list[str]
    attuned: list[str]
    attunement_slots_remaining: int
    carried_weight: float = 0.0
    carried_value: int | float = 0
    carrying_capacity: int = 0
    encumbrance: EncumbranceStatus = EncumbranceStatus.UNENCUMBERED

    def skill(self, skill: Skill) -> SkillLine:
        """Look up one skill row."""
        for line in self.skills:
            if line.skill == skill:
                return line
        raise KeyError(skill)


__all__ = [
    "SkillLine",
    "SaveLine",
    "DerivedSheet",
]
