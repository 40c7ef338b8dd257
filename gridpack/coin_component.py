"""A purse of coins owned by a character, bank or container."""

from __future__ import annotations

from .coin_value import CoinValue, retrieve_value
from .definitions import Event

# Coin mass in grams: metal density (g/cm3) times coin volume (cm3).
_COPPER_WEIGHT = 8.94 * 3.62
_SILVER_WEIGHT = 10.49 * 3.62
_GOLD_WEIGHT = 19.3 * 2.5
_PLATINUM_WEIGHT = 21.45 * 2.4


class CoinComponent:
    """Holds coins; changes that need authority are ignored without it."""

    def __init__(self, authority: bool = True) -> None:
        self.authority = authority
        self.purse = CoinValue()
        self.changed = Event()

    def edit(self, copper: int, silver: int, gold: int, platinum: int) -> None:
        """Add the given counts (negative to take coins away) and notify."""
        self.purse += CoinValue(copper, silver, gold, platinum)
        self.changed.emit()

    def pay_and_adjust(self, cost: CoinValue) -> None:
        """Pay ``cost``, exchanging coins as needed."""
        if not self.authority:
            return
        _, available, needed = retrieve_value(self.purse, cost)
        self.purse = CoinValue(
            available.copper - needed.copper,
            available.silver - needed.silver,
            available.gold - needed.gold,
            available.platinum - needed.platinum,
        )
        self.changed.emit()

    def remove_coins(self, value: CoinValue) -> None:
        if not self.authority:
            return
        self.edit(-value.copper, -value.silver, -value.gold, -value.platinum)

    def add_coins(self, value: CoinValue) -> None:
        if not self.authority:
            return
        self.edit(value.copper, value.silver, value.gold, value.platinum)

    def loot_purse(self, other: "CoinComponent") -> None:
        """Take every coin from ``other``."""
        content = other.purse
        self.edit(content.copper, content.silver, content.gold, content.platinum)
        other.clear()

    def clear(self) -> None:
        self.purse = CoinValue()

    def has_content(self) -> bool:
        return not self.purse.is_empty()

    def total_weight(self) -> float:
        """Weight of the coins in kilograms."""
        purse = self.purse
        grams = (
            purse.copper * _COPPER_WEIGHT
            + purse.silver * _SILVER_WEIGHT
            + purse.gold * _GOLD_WEIGHT
            + purse.platinum * _PLATINUM_WEIGHT
        )
        return grams / 1000.0