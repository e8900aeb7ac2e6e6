"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the sheet engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from dnd_sheet.engine.catalog import ItemCatalog
from dnd_sheet.models.character import CharacterProfile
from dnd_sheet.models.equipment import Pack


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_sheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_SHEET_DEBUG": "true",
        "DND_SHEET_LOG_LEVEL": "DEBUG",
        "DND_SHEET_RULES_ATTUNEMENT_SLOTS": "4",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Item Fixtures
# =============================================================================


@pytest.fixture
def item_records() -> list[dict[str, Any]]:
    """Provide raw item records in rule-book shape."""
    return [
        {"item_id": "cloak-of-protection", "name": "Cloak of Protection", "requires_attunement": True},
        {"item_id": "ring-of-protection", "name": "Ring of Protection", "requires_attunement": True},
        {"item_id": "amulet-of-health", "name": "Amulet of Health", "requires_attunement": True},
        {"item_id": "boots-of-elvenkind", "name": "Boots of Elvenkind", "requires_attunement": True},
        {"item_id": "bag-of-holding", "name": "Bag of Holding", "requires_attunement": False},
        {
            "item_id": "robe-of-the-archmagi",
            "name": "Robe of the Archmagi",
            "requires_attunement": True,
            "attunement_prerequisites": [{"class": "Wizard"}],
        },
        {
            "item_id": "wand-of-the-war-mage",
            "name": "Wand of the War Mage",
            "requires_attunement": True,
            "attunement_prerequisites": [{"spellcasting": True}],
        },
        {
            "item_id": "holy-avenger",
            "name": "Holy Avenger",
            "requires_attunement": True,
            "attunement_prerequisites": [{"class": "Paladin"}, {"alignment": "lawful good"}],
        },
        {
            "item_id": "elven-chain-of-mystery",
            "name": "Elven Chain of Mystery",
            "requires_attunement": True,
            "attunement_prerequisites": [{"kind": "moon_phase", "phase": "full"}],
        },
    ]


@pytest.fixture
def catalog(item_records: list[dict[str, Any]]) -> ItemCatalog:
    """Create a catalog of sample magic items."""
    return ItemCatalog.from_records(item_records)


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def wizard() -> CharacterProfile:
    """Create a level 5 high-elf wizard.

    Returns:
        CharacterProfile with wizard proficiencies.
    """
    return CharacterProfile(
        name="Elowen",
        race="Elf",
        subrace="High Elf",
        alignment="Neutral Good",
        classes=[{"class_name": "Wizard", "level": 5, "spellcaster": True}],
        features=["Spellcasting", "Arcane Recovery"],
        abilities={
            "strength": 8,
            "dexterity": 14,
            "constitution": 13,
            "intelligence": 17,
            "wisdom": 12,
            "charisma": 10,
        },
        skill_proficiencies={
            "Class": ["Arcana", "Investigation"],
            "Race": ["Perception"],
            "Background": ["arcana", "History"],
        },
        save_proficiencies=["Intelligence", "wis"],
        other_proficiencies={
            "Class": ["Daggers", "Quarterstaffs"],
            "Race": ["Longswords", "daggers"],
        },
    )


@pytest.fixture
def fighter() -> CharacterProfile:
    """Create a level 3 goliath fighter with Powerful Build."""
    return CharacterProfile(
        name="Thorin",
        race="Goliath",
        alignment="LG",
        classes=[{"class_name": "Fighter", "level": 3}],
        traits=["Powerful Build", "Stone's Endurance"],
        abilities={"strength": 16, "dexterity": 12, "constitution": 15, "wisdom": 10},
        skill_proficiencies={"Class": ["Athletics", "Perception"]},
        skill_expertise=[],
        save_proficiencies=["strength", "constitution"],
    )


# =============================================================================
# Equipment Fixtures
# =============================================================================


@pytest.fixture
def explorers_pack() -> Pack:
    """Create an Explorer's Pack with per-item weights and values."""
    return Pack(
        pack_id="explorers-pack",
        name="Explorer's Pack",
        category="starting",
        contents=[
            {"item_id": "backpack", "quantity": 1, "weight": 5, "value": {"amount": 2, "coin": "gp"}},
            {"item_id": "bedroll", "quantity": 1, "weight": 7, "value": {"amount": 1, "coin": "gp"}},
            {"item_id": "rations", "quantity": 10, "weight": 2, "value": {"amount": 5, "coin": "sp"}},
            {"item_id": "rope-hempen", "quantity": 1, "weight": 10, "value": {"amount": 1, "coin": "gp"}},
            {"item_id": "torch", "quantity": 10, "weight": 1, "value": {"amount": 1, "coin": "cp"}},
        ],
    )


@pytest.fixture
def burglars_pack() -> Pack:
    """Create a Burglar's Pack."""
    return Pack(
        pack_id="burglars-pack",
        name="Burglar's Pack",
        category="starting",
        contents=[
            {"item_id": "backpack", "weight": 5, "value": {"amount": 2, "coin": "gp"}},
            {"item_id": "ball-bearings", "weight": 2, "value": {"amount": 1, "coin": "gp"}},
            {"item_id": "crowbar", "weight": 5, "value": {"amount": 2, "coin": "gp"}},
            {"item_id": "torch", "quantity": 5, "weight": 1, "value": {"amount": 1, "coin": "cp"}},
        ],
    )


@pytest.fixture
def scholars_pack() -> Pack:
    """Create a Scholar's Pack."""
    return Pack(
        pack_id="scholars-pack",
        name="Scholar's Pack",
        category="class",
        contents=[
            {"item_id": "backpack", "weight": 5, "value": {"amount": 2, "coin": "gp"}},
            {"item_id": "book-of-lore", "weight": 5, "value": {"amount": 25, "coin": "gp"}},
            {"item_id": "ink", "value": {"amount": 10, "coin": "gp"}},
        ],
    )
