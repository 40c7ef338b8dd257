"""A character's keyring: keys taken off items, indexed by key identifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from .definitions import Event
from .items import KeyItem


@dataclass(frozen=True)
class KeyItemPair:
    """A key on the ring and the item it was taken from."""

    key_id: int
    item_id: int


class KeyringComponent:
    """Holds keys.

    ``key_added`` fires with ``(key_id, item_id)``, ``key_removed`` with
    ``(key_id,)`` and ``changed`` with no arguments after a rebuild.
    """

    def __init__(self) -> None:
        self.keyring_data: List[KeyItemPair] = []
        self._keys: Set[int] = set()
        self._key_to_item: Dict[int, int] = {}
        self.key_added = Event()
        self.key_removed = Event()
        self.changed = Event()

    def has_key(self, key_id: int) -> bool:
        return key_id in self._keys

    def try_add_key_from_item(self, item: Optional[KeyItem]) -> bool:
        """Put the key of ``item`` on the ring; False if there is no item or the key is already held."""
        if item is None or self.has_key(item.key_id):
            return False
        self.add_key(item.key_id, item.item_id)
        return True

    def add_key(self, key_id: int, item_id: int) -> None:
        self.keyring_data.append(KeyItemPair(key_id, item_id))
        self._keys.add(key_id)
        self._key_to_item[key_id] = item_id
        self.key_added.emit(key_id, item_id)

    def remove_key(self, key_id: int) -> None:
        """Take a key off the ring; raises KeyError if it is not held."""
        try:
            item_id = self._key_to_item.pop(key_id)
        except KeyError:
            raise KeyError(f"key {key_id} is not on the keyring") from None
        pair = KeyItemPair(key_id, item_id)
        self.keyring_data = [entry for entry in self.keyring_data if entry != pair]
        self._keys.discard(key_id)
        self.key_removed.emit(key_id)

    def item_for_key(self, key_id: int) -> Optional[int]:
        """Identifier of the item the key came from, or None if the key is not held."""
        return self._key_to_item.get(key_id)

    def rebuild(self) -> None:
        """Recompute the key lookups from ``keyring_data`` and notify."""
        self._keys = {pair.key_id for pair in self.keyring_data}
        self._key_to_item = {pair.key_id: pair.item_id for pair in self.keyring_data}
        self.changed.emit()