"""A character's carried bags: two fixed pockets plus four equippable bags."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .bag_storage import BagStorage, ItemPlacement
from .definitions import BagSlot, EquipmentSlot, Event
from .items import Item, ItemRegistry, ItemSize

_POCKETS = (BagSlot.POCKET1, BagSlot.POCKET2)

_BAG_TO_EQUIPMENT = {
    BagSlot.WAIST_BAG1: EquipmentSlot.WAIST_BAG1,
    BagSlot.WAIST_BAG2: EquipmentSlot.WAIST_BAG2,
    BagSlot.BACKPACK1: EquipmentSlot.BACKPACK1,
    BagSlot.BACKPACK2: EquipmentSlot.BACKPACK2,
}
_EQUIPMENT_TO_BAG = {equipment: bag for bag, equipment in _BAG_TO_EQUIPMENT.items()}


def equipment_slot_for_bag(bag_slot: BagSlot) -> EquipmentSlot:
    """The equipment slot a bag is worn in, or UNKNOWN for pockets and pools."""
    return _BAG_TO_EQUIPMENT.get(bag_slot, EquipmentSlot.UNKNOWN)


def bag_slot_for_equipment(slot: EquipmentSlot) -> BagSlot:
    """The bag held by an equipment slot, or UNKNOWN if the slot holds no bag."""
    return _EQUIPMENT_TO_BAG.get(slot, BagSlot.UNKNOWN)


class InventoryComponent:
    """All the bags a character carries.

    ``changed`` fires whenever a bag's contents change; ``item_added`` fires with
    ``(bag_slot, item_id, top_left)`` and ``item_removed`` with ``(bag_slot, top_left)``.
    """

    def __init__(self, registry: ItemRegistry) -> None:
        self.registry = registry
        self.changed = Event()
        self.item_added = Event()
        self.item_removed = Event()
        self._bags: Dict[BagSlot, BagStorage] = {}
        for slot in BagSlot:
            if not BagSlot.UNKNOWN < slot < BagSlot.LAST_VALID_BAG:
                continue
            bag = BagStorage(registry, slot)
            if slot in _POCKETS:
                bag.initialize(slot, 3, 2, ItemSize.MEDIUM)
            bag.changed.connect(self.changed.emit)
            self._bags[slot] = bag

    def bag(self, slot: BagSlot) -> BagStorage:
        """The bag stored in ``slot``; raises KeyError for slots that are not carried bags."""
        try:
            return self._bags[slot]
        except KeyError:
            raise KeyError(f"no bag in slot {BagSlot(slot).name}") from None

    def items_in_bag(self, slot: BagSlot) -> List[ItemPlacement]:
        return list(self.bag(slot).items)

    def item_at(self, bag_slot: BagSlot, index: int) -> Optional[int]:
        return self.bag(bag_slot).item_at(index)

    def remove_item(self, bag_slot: BagSlot, top_left: int) -> None:
        self.bag(bag_slot).remove_item(top_left)
        self.item_removed.emit(bag_slot, top_left)

    def add_item_at(self, bag_slot: BagSlot, item_id: int, top_left: int) -> None:
        self.bag(bag_slot).add_item_at(item_id, top_left)
        self.item_added.emit(bag_slot, item_id, top_left)

    def set_bag(
        self,
        bag_slot: BagSlot,
        valid: bool,
        width: int,
        height: int,
        max_store_size: ItemSize,
    ) -> None:
        """Reshape an equippable bag; pockets have a fixed shape and raise ValueError."""
        if bag_slot in _POCKETS:
            raise ValueError("pockets cannot be reconfigured")
        bag = self.bag(bag_slot)
        bag.initialize(bag_slot, width, height, max_store_size)
        bag.valid = valid

    def total_weight(self) -> float:
        return sum(bag.weight for bag in self._bags.values() if bag.valid)

    def has_item(self, item_id: int) -> bool:
        return any(bag.has_item(item_id) for bag in self._bags.values())

    def remove_item_if_possible(self, item_id: int) -> bool:
        """Remove the first stored item with this identifier; False if there is none."""
        for slot, bag in self._bags.items():
            top_left = bag.first_top_left(item_id)
            if top_left is not None and top_left >= 0:
                self.remove_item(slot, top_left)
                return True
        return False

    def remove_any_item_if_possible(self, item_ids: Iterable[int]) -> bool:
        """Remove one item, trying the identifiers in order; False if none is held."""
        return any(self.remove_item_if_possible(item_id) for item_id in item_ids)

    def find_suitable_slot(self, item: Item) -> Optional[Tuple[BagSlot, int]]:
        """The first valid bag with room for ``item`` and the top-left index, or None."""
        for slot, bag in self._bags.items():
            if not bag.valid or item.item_size > bag.max_store_size:
                continue
            top_left = bag.solver().first_valid_top_left(item)
            if top_left is not None:
                return slot, top_left
        return None

    def all_items(self) -> List[int]:
        return [placement.item_id for bag in self._bags.values() for placement in bag.items]

    def remove_all_items(self) -> None:
        for slot, bag in self._bags.items():
            for placement in list(bag.items):
                self.remove_item(slot, placement.top_left)