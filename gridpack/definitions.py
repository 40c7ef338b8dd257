"""Shared enumerations and a small event type used by the inventory components."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, List


class CurrencyType(IntEnum):
    """Coin denominations, from least to most valuable."""

    COPPER = 0
    SILVER = 1
    GOLD = 2
    PLATINUM = 3


class AmmoType(IntEnum):
    """Kinds of ammunition."""

    UNKNOWN = 0
    THROWABLE = 1
    BOLTS = 2
    ARROWS = 3


class EquipmentSocket(IntEnum):
    """Places on a character where an equipped item can be shown."""

    UNKNOWN = 0
    PRIMARY = 1
    SECONDARY = 2
    AMMO_BAG = 3
    WAIST_BAG1 = 4
    WAIST_BAG2 = 5
    SHOULDER_BAG1 = 6
    SHOULDER_BAG2 = 7
    BACKPACK = 8
    PRIMARY_SHEATH = 9
    SECONDARY_SHEATH = 10
    BACK_SHEATH = 11
    EAR_L = 12
    EAR_R = 13
    RING_L = 14
    RING_R = 15


class EquipmentSlot(IntEnum):
    """Equipment slots; an item's slot bit mask uses ``1 << slot``."""

    UNKNOWN = 0
    PRIMARY = 1
    SECONDARY = 2
    RANGE = 3
    AMMO = 4
    HEAD = 5
    FACE = 6
    EAR_L = 7
    EAR_R = 8
    NECK = 9
    SHOULDERS = 10
    BACK = 11
    TORSO = 12
    WRIST_L = 13
    WRIST_R = 14
    HANDS = 15
    FINGER_L = 16
    FINGER_R = 17
    WAIST = 18
    LEGS = 19
    FOOT = 20
    ARMS = 21
    WAIST_BAG1 = 22
    WAIST_BAG2 = 23
    BACKPACK1 = 24
    BACKPACK2 = 25
    LAST = 26


class BagSlot(IntEnum):
    """Item containers: the carried bags and a few shared pools."""

    UNKNOWN = 0
    POCKET1 = 1
    POCKET2 = 2
    WAIST_BAG1 = 3
    WAIST_BAG2 = 4
    BACKPACK1 = 5
    BACKPACK2 = 6
    LAST_VALID_BAG = 7
    LOOT_POOL = 20
    STAGING_AREA = 21
    BANK_POOL = 22


class Event:
    """A multicast notification: connected callbacks are called on emit."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Register a callback; registering the same callback twice has no effect."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Unregister a callback; raises ValueError if it was not connected."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError(f"callback {callback!r} is not connected") from None

    def emit(self, *args: Any) -> None:
        """Call every connected callback, in connection order, with ``args``."""
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)