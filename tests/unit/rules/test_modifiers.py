"""Tests for modifier arithmetic."""

from __future__ import annotations

import pytest

from dnd_sheet.models.enums import Ability, PassiveKind
from dnd_sheet.rules.modifiers import (
    PASSIVE_ABILITIES,
    ability_modifier,
    format_signed,
    passive_score,
    proficiency_bonus_for_level,
    saving_throw_modifier,
    skill_modifier,
)


class TestAbilityModifier:
    """Tests for ability_modifier."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (7, -2), (8, -1), (9, -1), (10, 0), (11, 0), (17, 3), (20, 5), (30, 10)],
    )
    def test_scores(self, score: int, expected: int) -> None:
        assert ability_modifier(score) == expected

    def test_missing_score_is_average(self) -> None:
        assert ability_modifier(None) == 0


class TestProficiencyBonus:
    """Tests for proficiency_bonus_for_level."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (16, 5), (17, 6), (20, 6)],
    )
    def test_levels(self, level: int, expected: int) -> None:
        assert proficiency_bonus_for_level(level) == expected

    @pytest.mark.parametrize("level", [None, 0, -3])
    def test_invalid_levels(self, level: int | None) -> None:
        assert proficiency_bonus_for_level(level) == 2


class TestSkillModifier:
    """Tests for skill_modifier."""

    def test_untrained(self) -> None:
        assert skill_modifier(3, 2, False, False) == 3

    def test_proficient(self) -> None:
        assert skill_modifier(3, 2, True, False) == 5

    def test_expertise(self) -> None:
        assert skill_modifier(3, 2, True, True) == 7

    def test_expertise_without_proficiency_flag(self) -> None:
        """Test expertise doubles the bonus regardless of the proficiency flag."""
        assert skill_modifier(3, 2, False, True) == 7

    def test_negative_ability(self) -> None:
        assert skill_modifier(-1, 3, True) == 2

    def test_missing_values_default(self) -> None:
        assert skill_modifier(None, None, None, None) == 0


class TestSavingThrowModifier:
    """Tests for saving_throw_modifier."""

    def test_not_proficient(self) -> None:
        assert saving_throw_modifier(2, 3) == 2

    def test_proficient(self) -> None:
        assert saving_throw_modifier(2, 3, True) == 5


class TestPassiveScore:
    """Tests for passive_score."""

    def test_passive_perception(self) -> None:
        assert passive_score(PassiveKind.PERCEPTION, 2, 3, True, False) == 15

    def test_passive_with_expertise(self) -> None:
        assert passive_score("investigation", 3, 3, True, True) == 19

    def test_untrained_insight(self) -> None:
        assert passive_score(PassiveKind.INSIGHT, -1, 2) == 9

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            passive_score("stealth", 0, 2)

    def test_fixed_abilities(self) -> None:
        assert PASSIVE_ABILITIES == {
            PassiveKind.PERCEPTION: Ability.WIS,
            PassiveKind.INVESTIGATION: Ability.INT,
            PassiveKind.INSIGHT: Ability.WIS,
        }


class TestFormatSigned:
    """Tests for format_signed."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(3, "+3"), (0, "+0"), (-1, "-1"), (12, "+12"), (None, "+0")],
    )
    def test_format(self, value: int | None, expected: str) -> None:
        assert format_signed(value) == expected
