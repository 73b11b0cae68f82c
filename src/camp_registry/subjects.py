"""Collaborators of the registry: the owning actor and the creatures it defeats."""

from __future__ import annotations

from dataclasses import dataclass

REST_CAMP_ID = 0

# Máscaras del id de landblock para el camp de área
DUNGEON_AREA_MASK = 0xFFFF0000
OUTDOOR_AREA_MASK = 0xF0F00000


@dataclass
class Actor:
    """Dueño de un registry. mark_changes_pending() es la señal de 'dirty'
    que observa la capa de persistencia."""

    guid: int
    name: str = ""
    changes_pending: bool = False
    change_signals: int = 0

    def mark_changes_pending(self) -> None:
        self.changes_pending = True
        self.change_signals += 1


@dataclass(frozen=True)
class Landblock:
    raw_id: int
    is_dungeon: bool = False


@dataclass
class Creature:
    creature_type: int = 0
    landblock: Landblock | None = None


def type_camp_id(creature: Creature) -> int:
    return int(creature.creature_type)


def area_camp_id(landblock: Landblock) -> int:
    """Dungeons camp on the whole landblock, outdoor terrain on a coarser grid."""
    mask = DUNGEON_AREA_MASK if landblock.is_dungeon else OUTDOOR_AREA_MASK
    return landblock.raw_id & mask
