# gridpack

Inventory logic for role-playing games, with no game engine underneath:
grid bags, coin purses, a bank, loot pools, a keyring, merchants and worn
equipment. Everything is plain Python objects; components announce changes
through `Event` objects.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `gridpack.definitions` — the enumerations `CurrencyType`, `AmmoType`,
  `EquipmentSocket`, `EquipmentSlot` and `BagSlot`, and `Event`, a multicast
  notification with `connect`, `disconnect` (raises `ValueError` for an
  unknown callback) and `emit`.
- `gridpack.items` — `Item`, `EquipableItem` and `KeyItem` (frozen
  dataclasses), `ItemSize`, and `ItemRegistry` with `register`, `fetch`
  (raises `UnknownItemError`) and `get` (returns `None`).
- `gridpack.coin_value` — `CoinValue` (copper, silver, gold, platinum; ten of
  each make one of the next) with `from_float`, `to_float`, `reduce`,
  `is_empty`, `+`, `+=` and `*` (scaling by a ratio). The functions `can_pay`,
  `can_pay_with_change` and `retrieve_value` decide whether a purse covers a
  price, breaking coins into change where needed.
- `gridpack.coin_component` — `CoinComponent`, a purse with `add_coins`,
  `remove_coins`, `pay_and_adjust`, `loot_purse`, `clear`, `has_content` and
  `total_weight` (kilograms). Changes that need authority are ignored when it
  is created with `authority=False`.
- `gridpack.bag_storage` — `GridBagSolver` finds the first free top-left cell
  for an item of a given width and height; `BagStorage` holds `ItemPlacement`
  entries and tracks the bag's weight. Initialising a valid bag that still
  holds items raises `BagNotEmptyError`; removing from an empty cell raises
  `LookupError`.
- `gridpack.inventory` — `InventoryComponent`: two 3×2 pockets plus four
  equippable bags (waist bags and backpacks) reshaped with `set_bag`.
  `find_suitable_slot` returns `(bag_slot, top_left)` or `None`.
  `equipment_slot_for_bag` and `bag_slot_for_equipment` map between bag and
  equipment slots.
- `gridpack.bank` — `BankComponent`, a grid store whose `reorganize` repacks
  items largest size class first.
- `gridpack.loot_pool` — `LootPoolComponent`; `fill` places item ids at the
  first free spots, skipping unknown or unplaceable ones.
- `gridpack.keyring` — `KeyringComponent` and `KeyItemPair`; keys are taken
  from `KeyItem`s with `try_add_key_from_item`.
- `gridpack.staging_area` — `StagingAreaComponent`, items set aside for a
  trade.
- `gridpack.merchant` — `MerchantComponent` with an unlimited static list and
  a dynamic stock of `DynamicStock` entries, optionally capped by
  `dynamic_pool_limit`.
- `gridpack.equipment` — `EquipmentComponent` (slots, the mesh names shown on
  each socket, `unsheath`/`sheath`, `find_suitable_slot`) and
  `find_best_socket`.

## A short tour

```python
from gridpack.coin_value import CoinValue, can_pay, can_pay_with_change

purse = CoinValue.from_float(1234)   # 1 pp, 2 gp, 3 sp, 4 cp
price = CoinValue.from_float(56)     # 5 sp, 6 cp

can_pay(purse, price)               # False: not enough silver or copper as-is
can_pay_with_change(purse, price)   # True: gold can be broken into change
```

```python
from gridpack.items import Item, ItemRegistry, ItemSize
from gridpack.definitions import BagSlot
from gridpack.inventory import InventoryComponent

registry = ItemRegistry()
registry.register(Item(item_id=1, name="Dagger", width=1, height=2,
                       weight=0.5, item_size=ItemSize.SMALL))

inventory = InventoryComponent(registry)
slot, top_left = inventory.find_suitable_slot(registry.fetch(1))
inventory.add_item_at(slot, 1, top_left)
inventory.has_item(1)                             # True
inventory.bag(BagSlot.POCKET1).item_at(top_left)  # 1
inventory.changed.connect(lambda: print("inventory changed"))
```

## What it does not do

gridpack is a library of game rules only. It has no command-line program, no
network play or syncing between clients and a server (the `authority` flags
only let a caller switch off changes), no rendering (equipment "meshes" are
just names stored per socket), no user interface and no saving or loading of
inventories.