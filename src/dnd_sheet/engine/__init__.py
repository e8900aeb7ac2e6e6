"""Engine layer: per-character sessions over the rules package.

Submodules:
    catalog: In-memory item catalog used as the item lookup.
    session: Per-character session owning the attunement ledger.
"""

from __future__ import annotations

from dnd_sheet.engine.catalog import ItemCatalog
from dnd_sheet.engine.session import CharacterSession


__all__ = [
    "ItemCatalog",
    "CharacterSession",
]
