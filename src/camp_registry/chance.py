"""Weighted chance tables for loot picks.

Two kinds of table:
    CHANCE  : each entry is an absolute probability; whatever the entries
              don't cover rolls None. A table summing to 1 is complete
              and never rolls None
    WEIGHT  : entries are relative weights, normalized to sum 1
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, TypeVar

import numpy as np

T = TypeVar("T")

# Tolerancia para tablas de probabilidades escritas a mano
_CHANCE_EPSILON = 1e-6


class ChanceTableType(str, Enum):
    CHANCE = "chance"
    WEIGHT = "weight"


class ChanceTable(Generic[T]):
    """Static table of (item, chance) pairs with a numpy-backed roll()."""

    def __init__(self, entries: Iterable[tuple[T, float]],
                 table_type: ChanceTableType = ChanceTableType.CHANCE) -> None:
        pairs = list(entries)
        if not pairs:
            raise ValueError("chance table is empty")

        self.items: list[T] = [item for item, _ in pairs]
        self.table_type = ChanceTableType(table_type)

        chances = np.asarray([chance for _, chance in pairs], dtype=np.float64)
        if np.any(chances < 0):
            raise ValueError("chance table has negative entries")

        total = float(chances.sum())
        if self.table_type is ChanceTableType.WEIGHT:
            if total <= 0:
                raise ValueError("weight table has no positive weights")
            chances = chances / total
        elif total > 1.0 + _CHANCE_EPSILON:
            raise ValueError(f"chance table sums to {total:.4f}, above 1.0")

        self._chances = chances
        self._cumulative = np.cumsum(chances)
        self.complete = abs(self.total - 1.0) <= _CHANCE_EPSILON

    @property
    def total(self) -> float:
        """Probability that a roll returns an item (1.0 for weight and complete tables)."""
        return float(self._cumulative[-1])

    def probability(self, item: T) -> float:
        return float(sum(c for i, c in zip(self.items, self._chances) if i == item))

    def roll(self, rng: np.random.Generator | None = None) -> T | None:
        """Draw one item. None when a CHANCE table's remainder comes up."""
        if rng is None:
            rng = np.random.default_rng()
        r = rng.random()
        idx = int(np.searchsorted(self._cumulative, r, side="right"))
        if idx >= len(self.items):
            if self.complete:
                # float rounding at the top of the cumulative sum
                return self.items[-1]
            return None
        return self.items[idx]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"ChanceTable({self.table_type.value}, entries={len(self)})"


MISSILE_CANTRIPS: ChanceTable[str] = ChanceTable([
    ("CANTRIPMISSILEWEAPONSAPTITUDE1", 0.10),

    ("CANTRIPDEFENDER1",               0.07),
    ("CANTRIPSTRENGTH1",               0.07),
    ("CANTRIPCOORDINATION1",           0.07),

    ("CANTRIPBLOODTHIRST1",            0.06),
    ("CANTRIPSWIFTHUNTER1",            0.06),
    ("CANTRIPQUICKNESS1",              0.06),

    ("CANTRIPENDURANCE1",              0.05),

    ("CANTRIPARCANEPROWESS1",          0.04),
    ("CANTRIPIMPREGNABILITY1",         0.04),

    ("CANTRIPINVULNERABILITY1",        0.03),
    ("CANTRIPMAGICRESISTANCE1",        0.03),

    ("CantripSummoningProwess1",       0.02),

    ("CANTRIPALCHEMICALPROWESS1",      0.01),
    ("CANTRIPARMOREXPERTISE1",         0.01),
    ("CANTRIPCOOKINGPROWESS1",         0.01),
    ("CANTRIPDECEPTIONPROWESS1",       0.01),
    ("CANTRIPFEALTY1",                 0.01),
    ("CANTRIPFLETCHINGPROWESS1",       0.01),
    ("CANTRIPHEALINGPROWESS1",         0.01),
    ("CANTRIPITEMEXPERTISE1",          0.01),
    ("CANTRIPJUMPINGPROWESS1",         0.01),
    ("CANTRIPLEADERSHIP1",             0.01),
    ("CANTRIPLOCKPICKPROWESS1",        0.01),
    ("CANTRIPMAGICITEMEXPERTISE1",     0.01),
    ("CANTRIPMONSTERATTUNEMENT1",      0.01),
    ("CANTRIPPERSONATTUNEMENT1",       0.01),
    ("CANTRIPSPRINT1",                 0.01),
    ("CANTRIPWEAPONEXPERTISE1",        0.01),

    ("CantripDirtyFightingProwess1",   0.01),
    ("CantripRecklessnessProwess1",    0.01),
    ("CantripSalvaging1",              0.01),
    ("CantripSneakAttackProwess1",     0.01),

    ("CANTRIPARMOR1",                  0.01),
    ("CANTRIPACIDWARD1",               0.01),
    ("CANTRIPBLUDGEONINGWARD1",        0.01),
    ("CANTRIPFLAMEWARD1",              0.01),
    ("CANTRIPFROSTWARD1",              0.01),
    ("CANTRIPPIERCINGWARD1",           0.01),
    ("CANTRIPSLASHINGWARD1",           0.01),
    ("CANTRIPSTORMWARD1",              0.01),

    ("CANTRIPFOCUS1",                  0.01),
    ("CANTRIPWILLPOWER1",              0.01),
])


def roll_missile_cantrip(rng: np.random.Generator | None = None) -> str:
    """The default table sums to 1, so every roll returns a spell."""
    return MISSILE_CANTRIPS.roll(rng)
