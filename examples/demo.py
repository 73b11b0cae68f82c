#!/usr/bin/env python3
"""
camp-registry demo: farming the same spot, then letting it cool down.

No server needed. Time is simulated.
"""

import logging

import numpy as np

from camp_registry import Actor, CampRegistry, Creature, Landblock
from camp_registry.chance import roll_missile_cantrip


class SimClock:
    def __init__(self, now=1_700_000_000):
        self.now = now

    def __call__(self):
        return self.now


def header(text):
    print(f"\n{'='*64}")
    print(f"  {text}")
    print(f"{'='*64}\n")


def bar(value):
    n = int(value * 20)
    return "█" * n + "░" * (20 - n)


def show(bonus, label):
    print(f"  {label:<14} type {bar(bonus.type_bonus)} {bonus.type_bonus:.2f}"
          f" | area {bonus.area_bonus:.2f} | rest {bonus.rest_bonus:.2f}")


def main():
    logging.basicConfig(level=logging.WARNING)
    clock = SimClock()
    player = Actor(guid=0x50000001, name="Farmer")
    camps = CampRegistry(player, clock=clock)

    drudge = Creature(creature_type=3, landblock=Landblock(0xA9B4001F))
    rng = np.random.default_rng(2024)

    header("CAMP-REGISTRY: Anti-farming Demo")

    # ── Farming ────────────────────────────────────────────────────────

    header("Killing 600 drudges in the same area, one every 2 seconds")
    for kill in range(1, 601):
        clock.now += 2
        bonus = camps.handle_interaction_event(drudge)
        if kill in (1, 100, 250, 500, 600):
            loot = roll_missile_cantrip(rng)
            show(bonus, f"kill {kill}")
            print(f"  {'':<14} loot: {loot}")

    # ── Cooling down ───────────────────────────────────────────────────

    header("Resting for an hour")
    clock.now += 3600
    show(camps.handle_interaction_event(drudge), "after 1 hour")

    header("Camps")
    for line in camps.describe():
        print(f"  {line}")

    print(f"\n  changes pending: {player.changes_pending}"
          f" ({player.change_signals} signals)")


if __name__ == "__main__":
    main()
