import pytest

from gridpack.bag_storage import GridBagSolver
from gridpack.items import Item, ItemRegistry, ItemSize
from gridpack.loot_pool import LootPoolComponent

SMALL = Item(item_id=1, width=1, height=1, item_size=ItemSize.SMALL)
WIDE = Item(item_id=2, width=2, height=1, item_size=ItemSize.MEDIUM)
BIG = Item(item_id=3, width=3, height=3, item_size=ItemSize.LARGE)


@pytest.fixture
def registry():
    reg = ItemRegistry()
    for item in (SMALL, WIDE, BIG):
        reg.register(item)
    return reg


def test_fill_places_first_item_at_origin(registry):
    pool = LootPoolComponent(registry, 3, 2)
    pool.fill([WIDE.item_id, SMALL.item_id])
    assert pool.item_at(0) == WIDE.item_id
    assert [p.item_id for p in pool.items] == [WIDE.item_id, SMALL.item_id]


def test_fill_skips_unknown_and_unplaceable(registry):
    pool = LootPoolComponent(registry, 2, 2)
    pool.fill([99, BIG.item_id, SMALL.item_id])
    assert [p.item_id for p in pool.items] == [SMALL.item_id]


def test_fill_result_does_not_overlap(registry):
    pool = LootPoolComponent(registry, 3, 3)
    pool.fill([WIDE.item_id, SMALL.item_id, WIDE.item_id, SMALL.item_id, WIDE.item_id])
    solver = GridBagSolver(3, 3)
    for placement in pool.items:
        item = registry.fetch(placement.item_id)
        assert solver.is_room_available(item, placement.top_left)
        solver.record(item, placement.top_left)
    assert len(pool.items) == 5


def test_fill_without_authority_does_nothing(registry):
    pool = LootPoolComponent(registry, 3, 3, authority=False)
    pool.fill([SMALL.item_id])
    assert pool.items == []


def test_add_and_remove(registry):
    pool = LootPoolComponent(registry, 3, 3)
    pool.add_item(SMALL.item_id, 4)
    assert pool.item_at(4) == SMALL.item_id
    pool.remove_item(7)
    assert len(pool.items) == 1
    pool.remove_item(4)
    assert pool.item_at(4) is None
    assert pool.items == []