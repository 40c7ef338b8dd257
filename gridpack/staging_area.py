"""Items set aside for a pending trade or hand-over."""

from __future__ import annotations

from typing import List

from .definitions import Event


class StagingAreaComponent:
    """A list of staged item identifiers; ``changed`` fires on every change."""

    def __init__(self) -> None:
        self.items: List[int] = []
        self.changed = Event()

    def clear(self) -> None:
        self.items.clear()
        self.changed.emit()

    def add_item(self, item_id: int) -> None:
        self.items.append(item_id)
        self.changed.emit()