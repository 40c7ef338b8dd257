"""A character's bank: a grid of stored items that can be tidied up."""

from __future__ import annotations

from typing import List, Optional

from .bag_storage import GridBagSolver, ItemPlacement
from .definitions import Event
from .items import ItemRegistry


class BankComponent:
    """Bank storage of ``width`` x ``height`` cells.

    ``item_added`` fires with ``(item_id, top_left)``, ``item_removed`` with
    ``(top_left,)`` and ``reorganized`` with no arguments.
    """

    def __init__(self, registry: ItemRegistry, width: int, height: int) -> None:
        self.registry = registry
        self.width = width
        self.height = height
        self.items: List[ItemPlacement] = []
        self.item_added = Event()
        self.item_removed = Event()
        self.reorganized = Event()

    def item_at(self, index: int) -> Optional[int]:
        """Identifier of the item whose top-left cell is ``index``, or None."""
        return next((p.item_id for p in self.items if p.top_left == index), None)

    def reorganize(self) -> None:
        """Repack all items, largest size class first; items left without room are dropped.

        Raises UnknownItemError if a stored identifier is not registered.
        """
        items = sorted(
            (self.registry.fetch(p.item_id) for p in self.items),
            key=lambda item: item.item_size,
            reverse=True,
        )
        self.items = []
        solver = GridBagSolver(self.width, self.height)
        for item in items:
            top_left = solver.first_valid_top_left(item)
            if top_left is not None:
                self.items.append(ItemPlacement(item.item_id, top_left))
                solver.record(item, top_left)
        self.reorganized.emit()

    def remove_item(self, top_left: int) -> None:
        """Remove the item at ``top_left`` if there is one, then notify."""
        placement = next((p for p in self.items if p.top_left == top_left), None)
        if placement is not None:
            self.items.remove(placement)
        self.item_removed.emit(top_left)

    def add_item(self, item_id: int, top_left: int) -> None:
        self.items.append(ItemPlacement(item_id, top_left))
        self.item_added.emit(item_id, top_left)