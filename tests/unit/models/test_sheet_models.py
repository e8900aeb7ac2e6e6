"""Tests for character, item, and enum models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from dnd_sheet.core.exceptions import PrerequisiteError
from dnd_sheet.models.character import AbilityScores, CharacterProfile
from dnd_sheet.models.enums import Ability, Alignment, PassiveKind, Skill
from dnd_sheet.models.items import CoinValue, ItemDefinition
from dnd_sheet.models.prerequisites import ClassRequirement


class TestEnums:
    """Tests for enum helpers."""

    @pytest.mark.parametrize("text", ["Wisdom", "wis", " WIS ", "wisdom"])
    def test_ability_from_name(self, text: str) -> None:
        assert Ability.from_name(text) == Ability.WIS

    def test_ability_from_unknown(self) -> None:
        assert Ability.from_name("luck") is None

    def test_ability_names(self) -> None:
        assert Ability.DEX.full_name == "Dexterity"
        assert Ability.DEX.abbreviation == "DEX"

    def test_skill_ability(self) -> None:
        assert Skill.STEALTH.ability == Ability.DEX
        assert Skill.ARCANA.ability == Ability.INT

    def test_skill_display_and_lookup(self) -> None:
        assert Skill.SLEIGHT_OF_HAND.display_name == "Sleight of Hand"
        assert Skill.ANIMAL_HANDLING.display_name == "Animal Handling"
        assert Skill.from_name("sleight of hand") == Skill.SLEIGHT_OF_HAND
        assert Skill.from_name("Animal_Handling") == Skill.ANIMAL_HANDLING
        assert Skill.from_name("Basket Weaving") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Lawful Good", Alignment.LAWFUL_GOOD),
            ("chaotic-neutral", Alignment.CHAOTIC_NEUTRAL),
            ("NE", Alignment.NEUTRAL_EVIL),
            ("neutral", Alignment.TRUE_NEUTRAL),
            ("true_neutral", Alignment.TRUE_NEUTRAL),
            ("sideways", None),
        ],
    )
    def test_alignment_parse(self, text: str, expected: Alignment | None) -> None:
        assert Alignment.parse(text) == expected

    def test_passive_kind_ability(self) -> None:
        assert PassiveKind.INVESTIGATION.ability == Ability.INT


class TestCoinValue:
    """Tests for CoinValue."""

    def test_coin_normalized(self) -> None:
        assert CoinValue(amount=5, coin=" GP ").coin == "gp"

    def test_blank_coin_is_copper(self) -> None:
        assert CoinValue(amount=5, coin="").coin == "cp"

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CoinValue(amount=-1)

    def test_str(self) -> None:
        assert str(CoinValue(amount=5, coin="sp")) == "5 sp"


class TestItemDefinition:
    """Tests for ItemDefinition."""

    def test_parses_prerequisites(self) -> None:
        item = ItemDefinition(
            item_id="staff-of-power",
            requires_attunement=True,
            attunement_prerequisites=[{"class": "Wizard"}],
        )

        assert item.attunement_prerequisites == [ClassRequirement(name="Wizard")]
        assert item.has_prerequisites

    def test_name_defaults_to_id(self) -> None:
        assert ItemDefinition(item_id="bag-of-holding").name == "bag-of-holding"

    def test_malformed_prerequisite_raises(self) -> None:
        with pytest.raises(PrerequisiteError):
            ItemDefinition(item_id="broken", attunement_prerequisites=[{"class": "A", "race": "B"}])

    def test_frozen(self) -> None:
        item = ItemDefinition(item_id="ring")

        with pytest.raises(PydanticValidationError):
            item.requires_attunement = True

    def test_extra_fields_ignored(self) -> None:
        item = ItemDefinition.model_validate({"item_id": "ring", "rarity": "rare"})

        assert not hasattr(item, "rarity")


class TestCharacterProfile:
    """Tests for CharacterProfile."""

    def test_level_sums_classes(self) -> None:
        profile = CharacterProfile(
            classes=[
                {"class_name": "Fighter", "level": 3},
                {"class_name": "Wizard", "level": 2, "spellcaster": True},
            ]
        )

        assert profile.level == 5
        assert profile.class_level("wizard") == 2

    def test_capability_queries(self, wizard: CharacterProfile) -> None:
        assert wizard.has_class(" WIZARD ")
        assert not wizard.has_class("Cleric")
        assert wizard.has_race("high elf")
        assert wizard.alignment == Alignment.NEUTRAL_GOOD

    def test_spellcaster_from_features(self) -> None:
        profile = CharacterProfile(
            classes=[{"class_name": "Fighter", "level": 3, "subclass": "Eldritch Knight"}],
            features=["Spellcasting"],
        )

        assert profile.is_spellcaster()

    def test_spellcaster_override(self, wizard: CharacterProfile) -> None:
        wizard.spellcaster = False

        assert not wizard.is_spellcaster()

    def test_blank_alignment_is_none(self) -> None:
        assert CharacterProfile(alignment="  ").alignment is None

    def test_unknown_alignment_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CharacterProfile(alignment="sideways")

    def test_save_proficiencies_parsed(self, wizard: CharacterProfile) -> None:
        assert wizard.save_proficiencies == [Ability.INT, Ability.WIS]

    def test_ability_score_bounds(self) -> None:
        with pytest.raises(PydanticValidationError):
            AbilityScores(strength=31)

    def test_traits(self, fighter: CharacterProfile) -> None:
        assert fighter.has_trait("powerful build")
        assert not fighter.has_trait("Darkvision")
