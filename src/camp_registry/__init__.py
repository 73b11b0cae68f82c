"""camp-registry: per-actor anti-farming interaction decay with diminishing bonuses."""

from camp_registry.models import CampBonus, CampCategory, CampRecord, Trace, max_interactions
from camp_registry.registry import CampRegistry
from camp_registry.subjects import Actor, Creature, Landblock
from camp_registry.chance import ChanceTable, ChanceTableType, MISSILE_CANTRIPS

__version__ = "0.1.0"
__all__ = [
    "CampRegistry", "CampRecord", "CampBonus", "CampCategory", "Trace",
    "Actor", "Creature", "Landblock", "max_interactions",
    "ChanceTable", "ChanceTableType", "MISSILE_CANTRIPS",
]
