"""Equipment pack models.

A pack (Explorer's Pack, Burglar's Pack, ...) is a named bundle of starting
equipment. Its totals are computed fields: they are recomputed from the
current contents every time they are read, so they can never drift from the
contents they summarize.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_sheet.core.constants import DEFAULT_CURRENCY_TABLE
from dnd_sheet.models.items import CoinValue


if TYPE_CHECKING:
    from dnd_sheet.rules.diagnostics import FallbackDiagnostics


class PackEntry(BaseModel):
    """One line of a pack's contents.

    Attributes:
        item_id: Identifier of the contained item.
        quantity: Number of copies; None means a single copy.
        weight: Weight in pounds of one copy; None counts as 0.
        value: Price of one copy; None counts as 0.
    """

    model_config = ConfigDict(frozen=True)

    item_id: str = Field(min_length=1)
    quantity: int | None = Field(default=None, ge=1)
    weight: float | None = Field(default=None, ge=0)
    value: CoinValue | None = Field(default=None)


class Pack(BaseModel):
    """A named equipment container with derived weight and value totals."""

    model_config = ConfigDict(validate_assignment=True)

    pack_id: str = Field(min_length=1)
    name: str = Field(default="")
    category: str | None = Field(default=None)
    description: str = Field(default="")
    contents: list[PackEntry] = Field(default_factory=list)

    @computed_field(description="Total weight in pounds")
    @property
    def total_weight(self) -> float:
        from dnd_sheet.rules.equipment import total_weight

        return total_weight(self.contents)

    @computed_field(description="Total value in copper pieces")
    @property
    def total_value(self) -> int | float:
        return self.value_in(DEFAULT_CURRENCY_TABLE)

    def value_in(
        self,
        currency_table: Mapping[str, int],
        diagnostics: FallbackDiagnostics | None = None,
    ) -> int | float:
        """Total value converted with a custom currency table."""
        from dnd_sheet.rules.equipment import total_value

        return total_value(
            self.contents, currency_table, pack_id=self.pack_id, diagnostics=diagnostics
        )

    def contains_item(self, item_id: str) -> bool:
        from dnd_sheet.rules.equipment import contains_item

        return contains_item(self.contents, item_id)

    def item_quantity(self, item_id: str) -> int:
        from dnd_sheet.rules.equipment import item_quantity

        return item_quantity(self.contents, item_id)


__all__ = [
    "PackEntry",
    "Pack",
]
