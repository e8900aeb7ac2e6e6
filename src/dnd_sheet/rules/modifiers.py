"""Modifier arithmetic for skills, saving throws, and passive scores.

Every function here is pure. Inputs are trusted: a missing value (None)
counts as 0 or False, and no function raises.

Example:
    >>> skill_modifier(3, 2, is_proficient=True, has_expertise=True)
    7
    >>> format_signed(-1)
    '-1'
"""

from __future__ import annotations

from dnd_sheet.core.constants import (
    MIN_PROFICIENCY_BONUS,
    PASSIVE_BASE,
    PROFICIENCY_BONUS_BY_LEVEL,
)
from dnd_sheet.models.enums import Ability, PassiveKind


PASSIVE_ABILITIES: dict[PassiveKind, Ability] = {
    PassiveKind.PERCEPTION: Ability.WIS,
    PassiveKind.INVESTIGATION: Ability.INT,
    PassiveKind.INSIGHT: Ability.WIS,
}
"""The ability each passive score is fixed to."""


def ability_modifier(score: int | None) -> int:
    """Calculate the ability modifier from an ability score.

    The modifier is calculated as: (score - 10) // 2

    Args:
        score: The ability score; None is treated as an average 10.

    Returns:
        The ability modifier.

    Example:
        >>> ability_modifier(7)
        -2
    """
    return ((score if score is not None else 10) - 10) // 2


def proficiency_bonus_for_level(level: int | None) -> int:
    """Proficiency bonus for a total character level.

    Levels below 1 (or missing) get the level 1 bonus.
    """
    if level is None or level < 1:
        return MIN_PROFICIENCY_BONUS
    for minimum, bonus in PROFICIENCY_BONUS_BY_LEVEL:
        if level >= minimum:
            return bonus
    return MIN_PROFICIENCY_BONUS


def skill_modifier(
    ability_mod: int | None,
    prof_bonus: int | None,
    is_proficient: bool | None = False,
    has_expertise: bool | None = False,
) -> int:
    """Total modifier for a skill check.

    Expertise doubles the proficiency bonus whether or not ``is_proficient``
    is set; callers are expected to set both flags consistently.

    Args:
        ability_mod: Modifier of the skill's ability.
        prof_bonus: The character's proficiency bonus.
        is_proficient: Whether the character is proficient in the skill.
        has_expertise: Whether the character has expertise in the skill.

    Returns:
        The skill modifier.
    """
    base = ability_mod or 0
    bonus = prof_bonus or 0
    if has_expertise:
        return base + 2 * bonus
    if is_proficient:
        return base + bonus
    return base


def saving_throw_modifier(
    ability_mod: int | None,
    prof_bonus: int | None,
    is_proficient: bool | None = False,
) -> int:
    """Total modifier for a saving throw."""
    base = ability_mod or 0
    if is_proficient:
        return base + (prof_bonus or 0)
    return base


def passive_score(
    kind: PassiveKind | str,
    ability_mod: int | None,
    prof_bonus: int | None,
    is_proficient: bool | None = False,
    has_expertise: bool | None = False,
) -> int:
    """Passive score (10 + skill modifier) for perception, investigation or insight.

    ``ability_mod`` must be the modifier of ``PASSIVE_ABILITIES[kind]``:
    wisdom for perception and insight, intelligence for investigation.

    Raises:
        ValueError: If ``kind`` is not a passive skill.
    """
    PassiveKind(kind)
    return PASSIVE_BASE + skill_modifier(ability_mod, prof_bonus, is_proficient, has_expertise)


def format_signed(value: int | None) -> str:
    """Render a modifier with an explicit sign ('+3', '-1', '+0')."""
    number = value or 0
    if number >= 0:
        return f"+{number}"
    return str(number)


__all__ = [
    "PASSIVE_ABILITIES",
    "ability_modifier",
    "proficiency_bonus_for_level",
    "skill_modifier",
    "saving_throw_modifier",
    "passive_score",
    "format_signed",
]
