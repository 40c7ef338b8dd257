"""Coin purses in four denominations and the rules for paying with change."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


def _truncated_remainder(value: int, modulus: int) -> int:
    """Remainder taking the sign of the dividend."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


@dataclass
class CoinValue:
    """An amount of coins: 10 copper make a silver, 10 silver a gold, 10 gold a platinum."""

    copper: int = 0
    silver: int = 0
    gold: int = 0
    platinum: int = 0

    @classmethod
    def from_float(cls, value: float) -> "CoinValue":
        """Split a value in copper units into the fewest coins (fractions are truncated)."""
        remaining = int(value)
        copper = _truncated_remainder(remaining, 10)
        remaining = (remaining - copper) // 10
        silver = _truncated_remainder(remaining, 10)
        remaining = (remaining - silver) // 10
        gold = _truncated_remainder(remaining, 10)
        remaining = (remaining - gold) // 10
        return cls(copper, silver, gold, remaining)

    def __add__(self, other: "CoinValue") -> "CoinValue":
        if not isinstance(other, CoinValue):
            return NotImplemented
        return CoinValue(
            self.copper + other.copper,
            self.silver + other.silver,
            self.gold + other.gold,
            self.platinum + other.platinum,
        )

    def __iadd__(self, other: "CoinValue") -> "CoinValue":
        if not isinstance(other, CoinValue):
            return NotImplemented
        self.copper += other.copper
        self.silver += other.silver
        self.gold += other.gold
        self.platinum += other.platinum
        return self

    def __mul__(self, ratio: float) -> "CoinValue":
        """Scale the value, rounding up for ratios >= 1 and down otherwise; never negative."""
        scaled = self.to_float() * ratio
        scaled += 0.5 if ratio >= 1.0 else -0.5
        return CoinValue.from_float(max(scaled, 0.0))

    def reduce(self) -> None:
        """Exchange every ten coins of a denomination for one of the next."""
        if self.copper >= 10:
            self.silver += self.copper // 10
            self.copper %= 10
        if self.silver >= 10:
            self.gold += self.silver // 10
            self.silver %= 10
        if self.gold >= 10:
            self.platinum += self.gold // 10
            self.gold %= 10

    def to_float(self) -> float:
        """Total value in copper units."""
        return float(self.copper + self.silver * 10 + self.gold * 100 + self.platinum * 1000)

    def is_empty(self) -> bool:
        return self.copper == 0 and self.silver == 0 and self.gold == 0 and self.platinum == 0


def _make_change(
    available_low: int,
    needed_low: int,
    available_current: int,
    needed_current: int,
    needed_higher: int,
) -> Tuple[int, int, int]:
    """Cover a shortfall in one denomination from the one below or above it.

    Returns the new available lower coins, available current coins and needed higher coins.
    """
    if available_current < needed_current:
        spare_low = available_low - needed_low
        missing_current = needed_current - available_current
        if spare_low >= missing_current * 10:
            available_low -= missing_current * 10
            available_current += missing_current
        else:
            factor = max((needed_current - available_current) // 10, 1)
            available_current += factor * 10
            needed_higher += factor
    return available_low, available_current, needed_higher


def retrieve_value(available: CoinValue, needed: CoinValue) -> Tuple[bool, CoinValue, CoinValue]:
    """Work out the exchanges needed to pay ``needed`` out of ``available``.

    Returns ``(success, available, needed)`` where the two values are adjusted copies:
    on success every denomination of the adjusted ``available`` covers the adjusted
    ``needed``. The arguments are left unchanged.
    """
    avail = replace(available)
    need = replace(needed)

    if avail.copper < need.copper:
        factor = max((need.copper - avail.copper) // 10, 1)
        avail.copper += factor * 10
        need.silver += factor

    avail.copper, avail.silver, need.gold = _make_change(
        avail.copper, need.copper, avail.silver, need.silver, need.gold
    )
    avail.silver, avail.gold, need.platinum = _make_change(
        avail.silver, need.silver, avail.gold, need.gold, need.platinum
    )

    if avail.platinum < need.platinum:
        spare_gold = avail.gold - need.gold
        missing_platinum = need.platinum - avail.platinum
        if spare_gold >= missing_platinum * 10:
            avail.gold -= missing_platinum * 10
            avail.platinum += missing_platinum
            return True, avail, need
        return False, avail, need

    return True, avail, need


def can_pay(available: CoinValue, needed: CoinValue) -> bool:
    """True if every denomination can be paid without making change."""
    return (
        needed.copper <= available.copper
        and needed.silver <= available.silver
        and needed.gold <= available.gold
        and needed.platinum <= available.platinum
    )


def can_pay_with_change(available: CoinValue, needed: CoinValue) -> bool:
    """True if the amount can be paid when coins may be exchanged."""
    success, _, _ = retrieve_value(available, needed)
    return success