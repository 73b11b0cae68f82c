"""Tests for models, decay arithmetic and the in-memory store."""

import pytest

from camp_registry.decay import apply_decay, compute_decay
from camp_registry.models import (
    CampBonus, CampCategory, CampRecord, Trace, category_of, max_interactions,
)
from camp_registry.store import CampStore
from camp_registry.subjects import Landblock, area_camp_id


# ── Caps ───────────────────────────────────────────────────────────────


class TestCaps:
    @pytest.mark.parametrize("camp_id, category, cap", [
        (0, CampCategory.REST, 3000),
        (1, CampCategory.TYPE, 2000),
        (0xFFFF, CampCategory.TYPE, 2000),
        (0x10000, CampCategory.AREA, 500),
        (0xF0F00000, CampCategory.AREA, 500),
    ])
    def test_category_and_cap(self, camp_id, category, cap):
        assert category_of(camp_id) is category
        assert max_interactions(camp_id) == cap

    def test_area_ids_are_area_camps(self):
        camp_id = area_camp_id(Landblock(0x12340000, is_dungeon=True))
        assert category_of(camp_id) is CampCategory.AREA


# ── Records ────────────────────────────────────────────────────────────


class TestRecord:
    def test_identity_is_owner_and_camp(self):
        a = CampRecord(camp_id=5, owner_id=1, num_interactions=3)
        b = CampRecord(camp_id=5, owner_id=1, num_interactions=9)
        c = CampRecord(camp_id=5, owner_id=2)
        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_category_property(self):
        assert CampRecord(camp_id=0, owner_id=1).category is CampCategory.REST

    def test_bonus_unpacks(self):
        type_bonus, area_bonus, rest_bonus = CampBonus(0.25, 0.5, 1.0)
        assert (type_bonus, area_bonus, rest_bonus) == (0.25, 0.5, 1.0)
        assert tuple(CampBonus()) == (0.0, 0.0, 0.0)


# ── Decay ──────────────────────────────────────────────────────────────


class TestDecayArithmetic:
    def test_compute_decay_floors(self):
        camp = CampRecord(camp_id=5, owner_id=1, num_interactions=10,
                          last_decay_time=1000)
        assert compute_decay(camp, now=1125) == 2
        assert compute_decay(camp, now=1059) == 0
        assert compute_decay(camp, now=400) == 0

    def test_apply_decay_untouched_within_window(self):
        camp = CampRecord(camp_id=5, owner_id=1, num_interactions=10,
                          last_decay_time=1000)
        assert apply_decay(camp, now=1030) == 0
        assert camp.num_interactions == 10
        assert camp.last_decay_time == 1000

    def test_apply_decay_updates(self):
        camp = CampRecord(camp_id=5, owner_id=1, num_interactions=1,
                          last_decay_time=1000)
        assert apply_decay(camp, now=1300) == 5
        assert camp.num_interactions == 0
        assert camp.last_decay_time == 1300


# ── Store ──────────────────────────────────────────────────────────────


class TestStore:
    def test_get_or_create(self):
        store = CampStore(owner_id=7)
        camp, created = store.get_or_create(3, now=100)
        assert created
        assert (camp.owner_id, camp.last_decay_time) == (7, 100)
        assert store.get_or_create(3, now=200) == (camp, False)

    def test_erase_all_returns_ids(self):
        store = CampStore(owner_id=7)
        for camp_id in (9, 1, 4):
            store.get_or_create(camp_id, now=0)
        assert sorted(store.erase_all()) == [1, 4, 9]
        assert store.count() == 0

    def test_all_camps_sorted_copies(self):
        store = CampStore(owner_id=7)
        store.get_or_create(9, now=0)
        store.get_or_create(1, now=0)
        camps = store.all_camps()
        assert [c.camp_id for c in camps] == [1, 9]
        assert camps[0] is not store.get(1)

    def test_trace_buffer_is_bounded(self):
        store = CampStore(owner_id=7, max_traces=3)
        for i in range(5):
            store.save_trace(Trace(operation="increment", camp_id=i))
        assert [t.camp_id for t in store.load_traces()] == [4, 3, 2]
