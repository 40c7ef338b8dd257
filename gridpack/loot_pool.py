"""The items that can be looted from a container or a defeated creature."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .bag_storage import GridBagSolver, ItemPlacement
from .items import ItemRegistry


class LootPoolComponent:
    """A grid of lootable items; filling it needs authority."""

    def __init__(
        self, registry: ItemRegistry, width: int, height: int, authority: bool = True
    ) -> None:
        self.registry = registry
        self.width = width
        self.height = height
        self.authority = authority
        self.items: List[ItemPlacement] = []

    def fill(self, item_ids: Iterable[int]) -> None:
        """Place the items in order at the first free spot; unknown or unplaceable ones are skipped."""
        if not self.authority:
            return
        solver = GridBagSolver(self.width, self.height)
        for item_id in item_ids:
            item = self.registry.get(item_id)
            if item is None:
                continue
            top_left = solver.first_valid_top_left(item)
            if top_left is not None:
                self.items.append(ItemPlacement(item.item_id, top_left))
                solver.record(item, top_left)

    def add_item(self, item_id: int, top_left: int) -> None:
        self.items.append(ItemPlacement(item_id, top_left))

    def item_at(self, index: int) -> Optional[int]:
        """Identifier of the item whose top-left cell is ``index``, or None."""
        return next((p.item_id for p in self.items if p.top_left == index), None)

    def remove_item(self, top_left: int) -> None:
        """Remove the item at ``top_left`` if there is one."""
        placement = next((p for p in self.items if p.top_left == top_left), None)
        if placement is not None:
            self.items.remove(placement)