"""Item definitions and the registry that resolves item identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, Optional


class ItemSize(IntEnum):
    """Size class of an item; a bag only holds items up to its maximum size."""

    TINY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    GIANT = 4


@dataclass(frozen=True)
class Item:
    """An item kind that occupies ``width`` x ``height`` cells in a bag."""

    item_id: int
    name: str = ""
    width: int = 1
    height: int = 1
    weight: float = 0.0
    item_size: ItemSize = ItemSize.SMALL
    mesh: Optional[str] = None


@dataclass(frozen=True)
class EquipableItem(Item):
    """An item that can be worn; ``equipable_slot_bitmask`` holds ``1 << slot`` bits."""

    equipment_mesh: Optional[str] = None
    weapon: bool = False
    shield: bool = False
    two_slots_item: bool = False
    equipable_slot_bitmask: int = 0


@dataclass(frozen=True)
class KeyItem(Item):
    """An item that opens something identified by ``key_id``."""

    key_id: int = 0


class UnknownItemError(LookupError):
    """Raised when an item identifier has not been registered."""


class ItemRegistry:
    """Maps item identifiers to item definitions."""

    def __init__(self) -> None:
        self._items: Dict[int, Item] = {}

    def register(self, item: Item) -> None:
        """Add an item, replacing any item with the same identifier."""
        self._items[item.item_id] = item

    def fetch(self, item_id: int) -> Item:
        """Return the item with this identifier or raise UnknownItemError."""
        try:
            return self._items[item_id]
        except KeyError:
            raise UnknownItemError(f"unknown item id {item_id}") from None

    def get(self, item_id: int) -> Optional[Item]:
        """Return the item with this identifier, or None."""
        return self._items.get(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())