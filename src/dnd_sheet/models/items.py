"""Item definitions consumed by the engine.

Item records are owned by the inventory collaborator and loaded from
rule-book data. The engine only reads them, referencing each by
``item_id``; definitions are frozen once validated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dnd_sheet.core.constants import BASE_COIN
from dnd_sheet.core.normalizer import normalize_for_lookup
from dnd_sheet.models.prerequisites import PrerequisiteClause, parse_prerequisites


class CoinValue(BaseModel):
    """A price in a single denomination, e.g. 5 gp."""

    model_config = ConfigDict(frozen=True)

    amount: int | float = Field(default=0, ge=0, description="Number of coins")
    coin: str = Field(default=BASE_COIN, description="Coin code, e.g. 'gp'")

    @field_validator("coin", mode="before")
    @classmethod
    def normalize_coin(cls, value: Any) -> Any:
        """Coin codes compare case-insensitively ('GP' == 'gp')."""
        if isinstance(value, str):
            return normalize_for_lookup(value) or BASE_COIN
        return value

    def __str__(self) -> str:
        return f"{self.amount} {self.coin}"


class ItemDefinition(BaseModel):
    """Static definition of an item as loaded from rule-book data.

    Attributes:
        item_id: Stable identifier used by inventories and the ledger.
        name: Display name.
        item_type: Free-form type tag ('wondrous item', 'weapon', 'pack').
        requires_attunement: Whether the item must be attuned to work.
        attunement_prerequisites: Ordered clauses, all of which must hold.
        weight: Weight in pounds, if known.
        value: Price, if known.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    item_id: str = Field(min_length=1, description="Reference identifier")
    name: str = Field(default="", description="Display name")
    item_type: str = Field(default="gear", description="Item type tag")
    requires_attunement: bool = Field(default=False)
    attunement_prerequisites: list[PrerequisiteClause] = Field(default_factory=list)
    weight: float | None = Field(default=None, ge=0, description="Weight in pounds")
    value: CoinValue | None = Field(default=None)

    @field_validator("attunement_prerequisites", mode="before")
    @classmethod
    def parse_clauses(cls, value: Any) -> list[PrerequisiteClause]:
        """Turn raw clause data into clause models."""
        return parse_prerequisites(value)

    @model_validator(mode="before")
    @classmethod
    def default_name(cls, data: Any) -> Any:
        """Fall back to the identifier when the record has no name."""
        if isinstance(data, dict) and not data.get("name") and data.get("item_id"):
            return {**data, "name": data["item_id"]}
        return data

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.attunement_prerequisites)


__all__ = [
    "CoinValue",
    "ItemDefinition",
]
