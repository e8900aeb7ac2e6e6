"""Integration tests for a full character sheet workflow."""

from __future__ import annotations

from dnd_sheet import CharacterProfile, CharacterSession, ItemCatalog, Pack
from dnd_sheet.models.enums import EncumbranceStatus, Skill
from dnd_sheet.rules.equipment import best_pack_for_items


class TestSheetFlow:
    """Load, edit, save and reload a character."""

    def test_save_and_reload(self, wizard: CharacterProfile, catalog: ItemCatalog) -> None:
        """Test attunement survives a save/load cycle in order."""
        session = CharacterSession(wizard, catalog.get)
        session.load()
        assert session.attune("robe-of-the-archmagi")
        assert session.attune("wand-of-the-war-mage")
        assert session.attune("cloak-of-protection")
        assert not session.attune("ring-of-protection")

        saved = session.unload()

        reloaded = CharacterSession(wizard, catalog.get)
        skipped = reloaded.load(saved["attuned"])

        assert skipped == []
        assert reloaded.derive().attuned == [
            "robe-of-the-archmagi",
            "wand-of-the-war-mage",
            "cloak-of-protection",
        ]

    def test_reload_with_edited_character(self, catalog: ItemCatalog) -> None:
        """Test a multiclass dip changes what can be restored."""
        profile = CharacterProfile(
            name="Brann",
            race="Human",
            alignment="lawful good",
            classes=[{"class_name": "Fighter", "level": 4}],
        )
        saved = ["holy-avenger", "cloak-of-protection"]

        before = CharacterSession(profile, catalog.get)
        assert before.load(saved) == ["holy-avenger"]

        profile.classes = [*profile.classes, {"class_name": "Paladin", "level": 1}]
        after = CharacterSession(profile, catalog.get)

        assert after.load(saved) == []
        assert after.derive().proficiency_bonus == 3

    def test_choose_pack_and_derive(
        self,
        fighter: CharacterProfile,
        catalog: ItemCatalog,
        explorers_pack: Pack,
        burglars_pack: Pack,
    ) -> None:
        """Test picking a starting pack then deriving load."""
        pack = best_pack_for_items([explorers_pack, burglars_pack], ["crowbar", "torch"])
        assert pack is burglars_pack

        heavy_kit = [
            *pack.contents,
            {"item_id": "plate-armor", "weight": 65, "value": {"amount": 1500, "coin": "gp"}},
        ]
        sheet = CharacterSession(fighter, catalog.get).derive(heavy_kit)

        assert sheet.carried_weight == 82.0
        assert sheet.encumbrance == EncumbranceStatus.ENCUMBERED
        assert sheet.skill(Skill.ATHLETICS).display == "+5"
