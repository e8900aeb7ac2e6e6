"""D&D 5E character sheet rules engine.

Derives the numeric and legal state of a character sheet: skill, save and
passive modifiers, merged proficiencies, attunement slots with
prerequisites, and equipment pack totals.

Example:
    >>> from dnd_sheet import CharacterProfile, CharacterSession, ItemCatalog
    >>>
    >>> catalog = ItemCatalog.from_records(records)
    >>> session = CharacterSession(CharacterProfile(name="Elowen"), catalog.get)
    >>> session.attune("wand-of-the-war-mage")
    True

Modules:
    core: Configuration, logging, exceptions, and normalization.
    models: Pydantic V2 schemas for characters, items, packs, and sheets.
    rules: Pure rules functions and the attunement ledger.
    engine: Item catalog and per-character sessions.
"""

from __future__ import annotations

from dnd_sheet.core.config import Settings, get_settings
from dnd_sheet.core.exceptions import SheetEngineError
from dnd_sheet.engine import CharacterSession, ItemCatalog
from dnd_sheet.models import CharacterProfile, DerivedSheet, ItemDefinition, Pack
from dnd_sheet.rules import AttunementLedger


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "SheetEngineError",
    "CharacterProfile",
    "ItemDefinition",
    "Pack",
    "DerivedSheet",
    "AttunementLedger",
    "ItemCatalog",
    "CharacterSession",
]
