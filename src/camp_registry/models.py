"""Core data models. A camp counts recent interactions. A bonus is derived from it."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum

UINT32_MAX = 0xFFFFFFFF

# Caps per category
REST_CAMP_CAP = 3000
AREA_CAMP_CAP = 500
TYPE_CAMP_CAP = 2000

# Ids above this are area camps
AREA_CAMP_THRESHOLD = 0x0000FFFF


class CampCategory(str, Enum):
    REST = "rest"      # descanso, id 0
    TYPE = "type"      # tipo de criatura, 1..0xFFFF
    AREA = "area"      # zona, > 0xFFFF


def category_of(camp_id: int) -> CampCategory:
    if camp_id == 0:
        return CampCategory.REST
    if camp_id > AREA_CAMP_THRESHOLD:
        return CampCategory.AREA
    return CampCategory.TYPE


def max_interactions(camp_id: int) -> int:
    """Maximum number of interactions a camp can hold."""
    category = category_of(camp_id)
    if category is CampCategory.REST:
        return REST_CAMP_CAP
    if category is CampCategory.AREA:
        return AREA_CAMP_CAP
    return TYPE_CAMP_CAP


@dataclass(eq=False)
class CampRecord:
    """Contador de un camp para un actor. Solo el registry lo muta."""

    camp_id: int
    owner_id: int
    num_interactions: int = 0
    last_decay_time: int = field(default_factory=lambda: int(time.time()))

    @property
    def category(self) -> CampCategory:
        return category_of(self.camp_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CampRecord):
            return NotImplemented
        return (self.owner_id, self.camp_id) == (other.owner_id, other.camp_id)

    def __hash__(self) -> int:
        return hash((self.owner_id, self.camp_id))


@dataclass(frozen=True)
class CampBonus:
    """Bonus per category. 1.0 = fresh, 0.0 = saturated or not applicable."""

    type_bonus: float = 0.0
    area_bonus: float = 0.0
    rest_bonus: float = 0.0

    def __iter__(self):
        return iter((self.type_bonus, self.area_bonus, self.rest_bonus))


@dataclass
class Trace:
    """Traza de una operación del registry (observabilidad)."""

    operation: str
    camp_id: int | None = None
    output_text: str = ""
    duration_ms: float | None = None
    created_at: float = field(default_factory=time.time)
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
