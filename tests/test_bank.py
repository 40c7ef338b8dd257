import pytest

from gridpack.bag_storage import GridBagSolver
from gridpack.bank import BankComponent
from gridpack.items import Item, ItemRegistry, ItemSize, UnknownItemError

SMALL = Item(item_id=1, width=1, height=1, item_size=ItemSize.SMALL)
LARGE = Item(item_id=2, width=2, height=2, item_size=ItemSize.LARGE)


@pytest.fixture
def registry():
    reg = ItemRegistry()
    reg.register(SMALL)
    reg.register(LARGE)
    return reg


def test_add_and_item_at(registry):
    bank = BankComponent(registry, 4, 4)
    added = []
    bank.item_added.connect(lambda *a: added.append(a))
    bank.add_item(SMALL.item_id, 7)
    assert bank.item_at(7) == SMALL.item_id
    assert bank.item_at(0) is None
    assert added == [(SMALL.item_id, 7)]


def test_remove_item(registry):
    bank = BankComponent(registry, 4, 4)
    removed = []
    bank.item_removed.connect(lambda *a: removed.append(a))
    bank.add_item(SMALL.item_id, 3)
    bank.remove_item(3)
    assert bank.items == []
    assert removed == [(3,)]


def test_remove_missing_still_notifies(registry):
    bank = BankComponent(registry, 4, 4)
    removed = []
    bank.item_removed.connect(lambda *a: removed.append(a))
    bank.add_item(SMALL.item_id, 3)
    bank.remove_item(5)
    assert len(bank.items) == 1
    assert removed == [(5,)]


def test_reorganize_places_largest_first(registry):
    bank = BankComponent(registry, 4, 4)
    bank.add_item(SMALL.item_id, 0)
    bank.add_item(LARGE.item_id, 5)
    events = []
    bank.reorganized.connect(lambda: events.append(True))
    bank.reorganize()
    assert bank.items[0].item_id == LARGE.item_id
    assert bank.items[0].top_left == 0
    assert bank.item_at(2) == SMALL.item_id
    assert events == [True]


def test_reorganize_result_does_not_overlap(registry):
    bank = BankComponent(registry, 4, 4)
    for index in range(6):
        bank.add_item(SMALL.item_id, index)
    bank.add_item(LARGE.item_id, 10)
    bank.reorganize()
    solver = GridBagSolver(4, 4)
    for placement in bank.items:
        item = registry.fetch(placement.item_id)
        assert solver.is_room_available(item, placement.top_left)
        solver.record(item, placement.top_left)
    assert len(bank.items) == 7


def test_reorganize_drops_items_without_room(registry):
    bank = BankComponent(registry, 2, 2)
    bank.add_item(LARGE.item_id, 0)
    bank.add_item(LARGE.item_id, 0)
    bank.reorganize()
    assert [p.item_id for p in bank.items] == [LARGE.item_id]


def test_reorganize_unknown_item_raises(registry):
    bank = BankComponent(registry, 4, 4)
    bank.add_item(42, 0)
    with pytest.raises(UnknownItemError):
        bank.reorganize()