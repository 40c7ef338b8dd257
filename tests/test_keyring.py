import pytest

from gridpack.items import KeyItem
from gridpack.keyring import KeyItemPair, KeyringComponent


def test_add_key_is_visible_everywhere():
    ring = KeyringComponent()
    ring.add_key(7, 100)
    assert ring.has_key(7)
    assert ring.item_for_key(7) == 100
    assert ring.keyring_data == [KeyItemPair(7, 100)]


def test_missing_key_lookup():
    ring = KeyringComponent()
    assert not ring.has_key(3)
    assert ring.item_for_key(3) is None


def test_try_add_from_item_and_duplicate():
    ring = KeyringComponent()
    key = KeyItem(item_id=55, key_id=9)
    assert ring.try_add_key_from_item(key) is True
    assert ring.try_add_key_from_item(key) is False
    assert ring.keyring_data == [KeyItemPair(9, 55)]


def test_try_add_none():
    ring = KeyringComponent()
    assert ring.try_add_key_from_item(None) is False
    assert ring.keyring_data == []


def test_remove_key():
    ring = KeyringComponent()
    ring.add_key(1, 10)
    ring.add_key(2, 20)
    ring.remove_key(1)
    assert not ring.has_key(1)
    assert ring.item_for_key(1) is None
    assert ring.keyring_data == [KeyItemPair(2, 20)]


def test_remove_unknown_key_raises():
    ring = KeyringComponent()
    with pytest.raises(KeyError):
        ring.remove_key(4)


def test_events_fire():
    ring = KeyringComponent()
    added, removed = [], []
    ring.key_added.connect(lambda k, i: added.append((k, i)))
    ring.key_removed.connect(removed.append)
    ring.add_key(5, 50)
    ring.remove_key(5)
    assert added == [(5, 50)]
    assert removed == [5]


def test_rebuild_from_data():
    ring = KeyringComponent()
    calls = []
    ring.changed.connect(lambda: calls.append(True))
    ring.keyring_data = [KeyItemPair(3, 30), KeyItemPair(4, 40)]
    ring.rebuild()
    assert ring.has_key(3) and ring.has_key(4)
    assert ring.item_for_key(4) == 40
    assert calls == [True]