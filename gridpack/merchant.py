"""A merchant's wares: an unlimited static list and a stock of resold items."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from .definitions import Event


@dataclass
class DynamicStock:
    """An item in a merchant's stock and how many are left."""

    item_id: int
    quantity: int


class MerchantComponent:
    """Merchant stock.

    Static items are always available; dynamic items have a quantity and the
    dynamic pool holds at most ``dynamic_pool_limit`` entries (None for no limit).
    ``changed`` fires whenever the stock changes.
    """

    def __init__(self, dynamic_pool_limit: Optional[int] = None) -> None:
        self.dynamic_pool_limit = dynamic_pool_limit
        self.static_pool: List[int] = []
        self.dynamic_pool: List[DynamicStock] = []
        self.changed = Event()

    def remove_item_id(self, item_id: int) -> None:
        """Sell one of the first dynamic entries with this identifier; static items are unaffected."""
        entry = next((s for s in self.dynamic_pool if s.item_id == item_id), None)
        if entry is None:
            return
        entry.quantity -= 1
        if entry.quantity <= 0:
            self.dynamic_pool.remove(entry)
        self.changed.emit()

    def item_at(self, index: int) -> Optional[int]:
        """Identifier at a position in the static list followed by the dynamic pool, or None."""
        if index < 0:
            return None
        if index < len(self.static_pool):
            return self.static_pool[index]
        index -= len(self.static_pool)
        if index < len(self.dynamic_pool):
            return self.dynamic_pool[index].item_id
        return None

    def item_from_static_pool(self, index: int) -> Optional[int]:
        if 0 <= index < len(self.static_pool):
            return self.static_pool[index]
        return None

    def item_from_dynamic_pool(self, index: int) -> Optional[DynamicStock]:
        """A copy of the dynamic entry at ``index``, or None."""
        if 0 <= index < len(self.dynamic_pool):
            return replace(self.dynamic_pool[index])
        return None

    def has_item(self, item_id: int) -> bool:
        return item_id in self.static_pool or any(
            stock.item_id == item_id for stock in self.dynamic_pool
        )

    def init_dynamic(self, items: Iterable[DynamicStock]) -> None:
        self.dynamic_pool = [replace(stock) for stock in items]
        self.changed.emit()

    def init_static(self, items: Iterable[int]) -> None:
        self.static_pool = list(items)
        self.changed.emit()

    def add_item(self, item_id: int) -> None:
        """Take an item into stock; ignored for static items or when the dynamic pool is full."""
        if item_id in self.static_pool:
            return
        entry = next((s for s in self.dynamic_pool if s.item_id == item_id), None)
        if entry is not None:
            entry.quantity += 1
        elif self.dynamic_pool_limit is None or len(self.dynamic_pool) < self.dynamic_pool_limit:
            self.dynamic_pool.append(DynamicStock(item_id, 1))
        else:
            return
        self.changed.emit()

    def remove_item(self, index: int) -> None:
        """Sell one of the dynamic entry at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < len(self.dynamic_pool):
            return
        entry = self.dynamic_pool[index]
        if entry.quantity > 1:
            entry.quantity -= 1
        else:
            del self.dynamic_pool[index]
        self.changed.emit()