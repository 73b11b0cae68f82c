"""Tests for weighted chance tables."""

import numpy as np
import pytest

from camp_registry.chance import (
    MISSILE_CANTRIPS, ChanceTable, ChanceTableType, roll_missile_cantrip,
)


class TestChanceTable:
    def test_seeded_rolls_are_deterministic(self):
        table = ChanceTable([("a", 0.5), ("b", 0.3), ("c", 0.2)])
        first = [table.roll(np.random.default_rng(42)) for _ in range(5)]
        second = [table.roll(np.random.default_rng(42)) for _ in range(5)]
        assert first == second

    def test_weight_table_normalizes(self):
        table = ChanceTable([("a", 1.0), ("b", 3.0)], ChanceTableType.WEIGHT)
        assert table.probability("b") == pytest.approx(0.75)
        assert table.total == pytest.approx(1.0)

    def test_weight_table_never_rolls_none(self):
        table = ChanceTable([("a", 0.7), ("b", 0.6)], ChanceTableType.WEIGHT)
        rng = np.random.default_rng(0)
        assert all(table.roll(rng) in ("a", "b") for _ in range(500))

    def test_chance_remainder_rolls_none(self):
        table = ChanceTable([("a", 0.5)])
        rng = np.random.default_rng(1)
        rolls = [table.roll(rng) for _ in range(2000)]
        nones = rolls.count(None)
        assert 0.4 < nones / len(rolls) < 0.6
        assert set(rolls) == {"a", None}

    def test_complete_chance_table_never_rolls_none(self):
        table = ChanceTable([("a", 0.1)] * 10)
        assert table.complete
        rng = np.random.default_rng(5)
        assert all(table.roll(rng) == "a" for _ in range(500))

    def test_partial_table_is_not_complete(self):
        assert not ChanceTable([("a", 0.5)]).complete

    def test_rolls_follow_distribution(self):
        table = ChanceTable([("common", 0.9), ("rare", 0.1)])
        rng = np.random.default_rng(7)
        rolls = [table.roll(rng) for _ in range(5000)]
        assert 0.05 < rolls.count("rare") / len(rolls) < 0.15

    @pytest.mark.parametrize("entries, table_type", [
        ([], ChanceTableType.CHANCE),
        ([("a", -0.1)], ChanceTableType.CHANCE),
        ([("a", 0.7), ("b", 0.6)], ChanceTableType.CHANCE),
        ([("a", 0.0)], ChanceTableType.WEIGHT),
    ])
    def test_invalid_tables(self, entries, table_type):
        with pytest.raises(ValueError):
            ChanceTable(entries, table_type)


class TestMissileCantrips:
    def test_table_is_complete(self):
        assert MISSILE_CANTRIPS.total == pytest.approx(1.0)
        assert MISSILE_CANTRIPS.complete
        assert MISSILE_CANTRIPS.probability("CANTRIPMISSILEWEAPONSAPTITUDE1") == pytest.approx(0.10)

    def test_roll(self):
        rng = np.random.default_rng(3)
        for _ in range(50):
            assert roll_missile_cantrip(rng) in MISSILE_CANTRIPS.items
