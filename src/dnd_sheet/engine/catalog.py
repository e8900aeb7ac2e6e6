"""In-memory item catalog.

Serves as the item lookup collaborator for attunement: ``catalog.get`` is
an :data:`~dnd_sheet.rules.attunement.ItemLookup` and ``catalog.get_async``
an :data:`~dnd_sheet.rules.attunement.AsyncItemLookup`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import pydantic

from dnd_sheet.core.exceptions import ValidationError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.items import ItemDefinition


logger = get_logger(__name__)


class ItemCatalog:
    """Item definitions keyed by ``item_id``.

    Example:
        >>> catalog = ItemCatalog.from_records([
        ...     {"item_id": "ring-of-protection", "requires_attunement": True},
        ... ])
        >>> catalog.get("ring-of-protection").name
        'ring-of-protection'
    """

    def __init__(self, items: Iterable[ItemDefinition] = ()) -> None:
        self._items: dict[str, ItemDefinition] = {}
        for item in items:
            self.add(item)

    def add(self, item: ItemDefinition) -> None:
        """Register an item definition.

        Raises:
            ValidationError: If another item already uses the same id.
        """
        if item.item_id in self._items:
            raise ValidationError(
                f"Duplicate item id: {item.item_id}",
                field_name="item_id",
                invalid_value=item.item_id,
            )
        self._items[item.item_id] = item

    def get(self, item_id: str) -> ItemDefinition | None:
        return self._items.get(item_id)

    async def get_async(self, item_id: str) -> ItemDefinition | None:
        return self.get(item_id)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> ItemCatalog:
        """Build a catalog from raw rule-book records.

        Raises:
            ValidationError: If a record is not a valid item definition.
        """
        catalog = cls()
        for index, record in enumerate(records):
            try:
                item = ItemDefinition.model_validate(record)
            except pydantic.ValidationError as exc:
                raise ValidationError(
                    f"Invalid item record at index {index}",
                    field_name="item_id",
                    invalid_value=record.get("item_id") if isinstance(record, Mapping) else None,
                    details={"errors": exc.errors(include_url=False)},
                ) from exc
            catalog.add(item)
        logger.debug("Item catalog loaded", items=len(catalog))
        return catalog

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemDefinition]:
        return iter(self._items.values())


__all__ = ["ItemCatalog"]
