"""Grid bags: item placement on a width x height grid and bag contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .definitions import BagSlot, Event
from .items import Item, ItemRegistry, ItemSize


@dataclass(frozen=True)
class ItemPlacement:
    """An item stored in a grid, identified by its top-left cell index."""

    item_id: int
    top_left: int


def _split_index(index: int, width: int) -> tuple:
    """Column and row of a cell index, truncating toward zero for negative indices."""
    row, column = divmod(abs(index), width)
    if index < 0:
        return -column, -row
    return column, row


class GridBagSolver:
    """Occupancy grid used to find room for items."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.grid: List[Optional[Item]] = [None] * (width * height)

    def record(self, item: Item, top_left: int) -> None:
        """Mark the cells covered by ``item`` at ``top_left`` as occupied; negative indices are ignored."""
        if top_left < 0:
            return
        start_x, start_y = _split_index(top_left, self.width)
        for y in range(start_y, start_y + item.height):
            for x in range(start_x, start_x + item.width):
                self.grid[x + y * self.width] = item

    def is_room_available(self, item: Item, top_left: int) -> bool:
        """True if ``item`` fits entirely inside the grid on empty cells at ``top_left``."""
        start_x, start_y = _split_index(top_left, self.width)
        for y in range(start_y, start_y + item.height):
            for x in range(start_x, start_x + item.width):
                if not (0 <= x < self.width and 0 <= y < self.height):
                    return False
                if self.grid[x + y * self.width] is not None:
                    return False
        return True

    def first_valid_top_left(self, item: Item) -> Optional[int]:
        """The lowest cell index where ``item`` fits, or None."""
        return next(
            (index for index in range(len(self.grid)) if self.is_room_available(item, index)),
            None,
        )


class BagNotEmptyError(RuntimeError):
    """Raised when a valid bag holding items is initialised again."""


class BagStorage:
    """The contents of one bag, with its size limits and total weight."""

    def __init__(self, registry: ItemRegistry, slot: BagSlot = BagSlot.UNKNOWN) -> None:
        self.registry = registry
        self.slot = slot
        self.width = 0
        self.height = 0
        self.max_store_size = ItemSize.TINY
        self.valid = False
        self.weight = 0.0
        self.items: List[ItemPlacement] = []
        self.changed = Event()

    def initialize(self, slot: BagSlot, width: int, height: int, max_store_size: ItemSize) -> None:
        """Set the bag's shape and make it valid; a valid bag must be empty to be reset."""
        if self.valid and self.items:
            raise BagNotEmptyError(f"bag {slot.name} was not empty when re-initialised")
        self.slot = slot
        self.width = width
        self.height = height
        self.max_store_size = max_store_size
        self.valid = True

    def solver(self) -> GridBagSolver:
        """A grid solver with every known item of this bag recorded."""
        grid = GridBagSolver(self.width, self.height)
        for placement in self.items:
            item = self.registry.get(placement.item_id)
            if item is not None:
                grid.record(item, placement.top_left)
        return grid

    def has_item(self, item_id: int) -> bool:
        return any(placement.item_id == item_id for placement in self.items)

    def first_top_left(self, item_id: int) -> Optional[int]:
        """Top-left index of the first stored item with this identifier, or None."""
        return next(
            (placement.top_left for placement in self.items if placement.item_id == item_id),
            None,
        )

    def item_at(self, index: int) -> Optional[int]:
        """Identifier of the item whose top-left cell is ``index``, or None."""
        return next(
            (placement.item_id for placement in self.items if placement.top_left == index),
            None,
        )

    def remove_item(self, top_left: int) -> None:
        """Remove the item whose top-left cell is ``top_left``; raises LookupError if none."""
        placement = next((p for p in self.items if p.top_left == top_left), None)
        if placement is None:
            raise LookupError(f"no item at index {top_left} in bag {self.slot.name}")
        self.items.remove(placement)
        item = self.registry.get(placement.item_id)
        if item is not None:
            self.weight -= item.weight
        self.changed.emit()

    def add_item_at(self, item_id: int, top_left: int) -> None:
        """Store an item at ``top_left``; unknown items are stored without weight or notification."""
        self.items.append(ItemPlacement(item_id, top_left))
        item = self.registry.get(item_id)
        if item is None:
            return
        self.weight += item.weight
        self.changed.emit()