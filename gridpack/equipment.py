"""Worn equipment: which item sits in each slot and where its mesh is shown."""

from __future__ import annotations

from typing import Dict, Optional

from .definitions import EquipmentSlot, EquipmentSocket, Event
from .items import EquipableItem

_SHEATH_SOCKETS = (
    EquipmentSocket.PRIMARY_SHEATH,
    EquipmentSocket.SECONDARY_SHEATH,
    EquipmentSocket.BACK_SHEATH,
)

_SKELETAL_SOCKETS = (EquipmentSocket.PRIMARY, EquipmentSocket.SECONDARY)

_TWO_SLOT_ANCHORS = (
    EquipmentSlot.WAIST_BAG1,
    EquipmentSlot.BACKPACK1,
    EquipmentSlot.PRIMARY,
)

_DIRECT_SOCKETS = {
    EquipmentSlot.RANGE: EquipmentSocket.BACK_SHEATH,
    EquipmentSlot.AMMO: EquipmentSocket.AMMO_BAG,
    EquipmentSlot.WAIST_BAG1: EquipmentSocket.WAIST_BAG1,
    EquipmentSlot.WAIST_BAG2: EquipmentSocket.WAIST_BAG2,
    EquipmentSlot.EAR_L: EquipmentSocket.EAR_L,
    EquipmentSlot.EAR_R: EquipmentSocket.EAR_R,
    EquipmentSlot.FINGER_L: EquipmentSocket.RING_L,
    EquipmentSlot.FINGER_R: EquipmentSocket.RING_R,
}


def find_best_socket(item: EquipableItem, slot: EquipmentSlot) -> EquipmentSocket:
    """The socket where ``item`` is shown when worn in ``slot``; UNKNOWN if it is not shown."""
    if slot == EquipmentSlot.PRIMARY:
        return EquipmentSocket.PRIMARY_SHEATH if item.weapon else EquipmentSocket.PRIMARY
    if slot == EquipmentSlot.SECONDARY:
        if item.shield:
            return EquipmentSocket.BACK_SHEATH
        return EquipmentSocket.SECONDARY_SHEATH if item.weapon else EquipmentSocket.SECONDARY
    if slot == EquipmentSlot.BACKPACK1:
        return EquipmentSocket.BACKPACK if item.two_slots_item else EquipmentSocket.SHOULDER_BAG1
    if slot == EquipmentSlot.BACKPACK2:
        return EquipmentSocket.BACKPACK if item.two_slots_item else EquipmentSocket.SHOULDER_BAG2
    return _DIRECT_SOCKETS.get(slot, EquipmentSocket.UNKNOWN)


class EquipmentComponent:
    """The items a character wears and the meshes shown on its sockets.

    ``changed`` fires after any slot changes; ``item_equipped`` and
    ``item_unequipped`` fire with ``(slot, item)``.
    """

    def __init__(self) -> None:
        self.equipment: Dict[EquipmentSlot, EquipableItem] = {}
        self.static_meshes: Dict[EquipmentSocket, Optional[str]] = {
            socket: None for socket in EquipmentSocket if socket != EquipmentSocket.UNKNOWN
        }
        self.skeletal_meshes: Dict[EquipmentSocket, Optional[str]] = {
            socket: None for socket in _SKELETAL_SOCKETS
        }
        self.primary_original_socket = EquipmentSocket.UNKNOWN
        self.secondary_original_socket = EquipmentSocket.UNKNOWN
        self.changed = Event()
        self.item_equipped = Event()
        self.item_unequipped = Event()

    def mesh_at(self, socket: EquipmentSocket) -> Optional[str]:
        """The static mesh shown on ``socket``, or None."""
        return self.static_meshes.get(socket)

    def _show(self, item: EquipableItem, slot: EquipmentSlot) -> bool:
        socket = find_best_socket(item, slot)
        if socket == EquipmentSocket.UNKNOWN:
            return False
        if item.equipment_mesh and socket in self.skeletal_meshes:
            self.skeletal_meshes[socket] = item.equipment_mesh
            return True
        if socket not in self.static_meshes or not item.mesh:
            return False
        self.static_meshes[socket] = item.mesh
        return True

    def _hide(self, item: EquipableItem, slot: EquipmentSlot) -> bool:
        socket = find_best_socket(item, slot)
        if socket == EquipmentSocket.UNKNOWN:
            return False
        if item.equipment_mesh and socket in self.skeletal_meshes:
            self.skeletal_meshes[socket] = None
            return True
        if not item.mesh or socket not in self.static_meshes:
            return False
        if self.static_meshes[socket] is None:
            # The item was drawn out of its sheath: clear the hand holding it.
            if self.primary_original_socket == socket:
                self.static_meshes[EquipmentSocket.PRIMARY] = None
                return True
            if self.secondary_original_socket == socket:
                self.static_meshes[EquipmentSocket.SECONDARY] = None
                return True
        self.static_meshes[socket] = None
        return True

    def equip_item(self, item: EquipableItem, slot: EquipmentSlot) -> None:
        """Wear ``item`` in ``slot``; ignored if the slot is taken."""
        if slot in self.equipment:
            return
        self.equipment[slot] = item
        self._show(item, slot)
        self.changed.emit()
        self.item_equipped.emit(slot, item)

    def is_slot_empty(self, slot: EquipmentSlot) -> bool:
        return slot not in self.equipment

    def item_at_slot(self, slot: EquipmentSlot) -> Optional[EquipableItem]:
        return self.equipment.get(slot)

    def remove_item(self, slot: EquipmentSlot) -> bool:
        """Take off the item in ``slot``; False if the slot is empty."""
        item = self.equipment.get(slot)
        if item is None:
            return False
        self._hide(item, slot)
        self.item_unequipped.emit(slot, item)
        del self.equipment[slot]
        self.changed.emit()
        return True

    def remove_all(self) -> None:
        for slot in EquipmentSlot:
            if slot != EquipmentSlot.LAST:
                self.remove_item(slot)

    def total_weight(self) -> float:
        return sum(item.weight for item in self.equipment.values())

    def find_suitable_slot(self, item: EquipableItem) -> EquipmentSlot:
        """The first free slot the item accepts, or UNKNOWN.

        Items taking two slots only go into the first slot of a pair.
        """
        for slot in EquipmentSlot:
            if slot in (EquipmentSlot.UNKNOWN, EquipmentSlot.LAST) or slot in self.equipment:
                continue
            if not item.equipable_slot_bitmask & (1 << slot):
                continue
            if not item.two_slots_item or slot in _TWO_SLOT_ANCHORS:
                return slot
        return EquipmentSlot.UNKNOWN

    def unsheath(self, slot: EquipmentSlot) -> None:
        """Draw the sheathed item worn in ``slot`` into the matching hand."""
        item = self.equipment.get(slot)
        if item is None:
            return
        sheath = find_best_socket(item, slot)
        if sheath not in _SHEATH_SOCKETS:
            return
        if sheath == EquipmentSocket.PRIMARY_SHEATH:
            live = EquipmentSocket.PRIMARY
        elif sheath == EquipmentSocket.SECONDARY_SHEATH:
            live = EquipmentSocket.SECONDARY
        elif slot == EquipmentSlot.SECONDARY:
            live = EquipmentSocket.SECONDARY
        elif slot in (EquipmentSlot.PRIMARY, EquipmentSlot.RANGE):
            live = EquipmentSocket.PRIMARY
        else:
            return

        if live == EquipmentSocket.PRIMARY:
            self.primary_original_socket = sheath
        else:
            self.secondary_original_socket = sheath

        mesh = self.static_meshes[sheath]
        if mesh is None or self.static_meshes[live] is not None:
            return
        self.static_meshes[sheath] = None
        self.static_meshes[live] = mesh

    def sheath(self) -> None:
        """Put drawn items back where they were drawn from; stops at the first blocked return."""
        for live, original in (
            (EquipmentSocket.PRIMARY, self.primary_original_socket),
            (EquipmentSocket.SECONDARY, self.secondary_original_socket),
        ):
            mesh = self.static_meshes[live]
            if mesh is None:
                continue
            if original not in self.static_meshes or self.static_meshes[original] is not None:
                return
            self.static_meshes[live] = None
            self.static_meshes[original] = mesh

    def unsheath_melee(self) -> None:
        self.unsheath(EquipmentSlot.PRIMARY)
        self.unsheath(EquipmentSlot.SECONDARY)

    def sheath_melee(self) -> None:
        self.sheath()