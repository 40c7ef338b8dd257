from gridpack.merchant import DynamicStock, MerchantComponent


def make_merchant(limit=None):
    merchant = MerchantComponent(dynamic_pool_limit=limit)
    merchant.init_static([10, 11])
    merchant.init_dynamic([DynamicStock(20, 2), DynamicStock(21, 1)])
    return merchant


def test_item_at_spans_both_pools():
    merchant = make_merchant()
    assert [merchant.item_at(i) for i in range(4)] == [10, 11, 20, 21]
    assert merchant.item_at(4) is None
    assert merchant.item_at(-1) is None


def test_pool_lookups():
    merchant = make_merchant()
    assert merchant.item_from_static_pool(1) == 11
    assert merchant.item_from_static_pool(2) is None
    assert merchant.item_from_dynamic_pool(0) == DynamicStock(20, 2)
    assert merchant.item_from_dynamic_pool(5) is None


def test_has_item():
    merchant = make_merchant()
    assert merchant.has_item(10)
    assert merchant.has_item(21)
    assert not merchant.has_item(99)


def test_add_static_item_ignored():
    merchant = make_merchant()
    merchant.add_item(10)
    assert merchant.dynamic_pool == [DynamicStock(20, 2), DynamicStock(21, 1)]


def test_add_existing_increments_and_new_appends():
    merchant = make_merchant()
    merchant.add_item(21)
    merchant.add_item(30)
    assert merchant.dynamic_pool == [DynamicStock(20, 2), DynamicStock(21, 2), DynamicStock(30, 1)]


def test_add_dropped_when_pool_full():
    merchant = make_merchant(limit=2)
    merchant.add_item(30)
    assert not merchant.has_item(30)
    assert len(merchant.dynamic_pool) == 2


def test_remove_item_id_decrements_then_removes():
    merchant = make_merchant()
    merchant.remove_item_id(20)
    assert merchant.item_from_dynamic_pool(0) == DynamicStock(20, 1)
    merchant.remove_item_id(20)
    assert not merchant.has_item(20)


def test_remove_item_id_leaves_static():
    merchant = make_merchant()
    merchant.remove_item_id(10)
    assert merchant.static_pool == [10, 11]


def test_remove_item_by_index():
    merchant = make_merchant()
    merchant.remove_item(1)
    assert merchant.dynamic_pool == [DynamicStock(20, 2)]
    merchant.remove_item(0)
    assert merchant.dynamic_pool == [DynamicStock(20, 1)]
    merchant.remove_item(7)
    assert merchant.dynamic_pool == [DynamicStock(20, 1)]


def test_init_dynamic_copies_entries():
    stock = [DynamicStock(40, 3)]
    merchant = MerchantComponent()
    merchant.init_dynamic(stock)
    merchant.remove_item(0)
    assert stock[0].quantity == 3
    assert merchant.dynamic_pool[0].quantity < stock[0].quantity


def test_changed_fires_on_init():
    merchant = MerchantComponent()
    calls = []
    merchant.changed.connect(lambda: calls.append(True))
    merchant.init_static([1])
    merchant.init_dynamic([])
    assert calls == [True, True]