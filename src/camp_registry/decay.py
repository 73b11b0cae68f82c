"""Interaction decay. Camps that aren't farmed cool down."""

from __future__ import annotations

import math

from camp_registry.models import CampRecord

# Segundos que tarda en decaer una interacción
DEFAULT_DECAY_RATE = 60


def compute_decay(camp: CampRecord, now: int,
                  decay_rate: float = DEFAULT_DECAY_RATE) -> int:
    """Calcula cuántas interacciones han decaído desde el último check.

    Fórmula: floor(elapsed / decay_rate), nunca negativo
    (un reloj que va hacia atrás no suma interacciones).
    """
    elapsed = now - camp.last_decay_time
    return max(math.floor(elapsed / decay_rate), 0)


def apply_decay(camp: CampRecord, now: int,
                decay_rate: float = DEFAULT_DECAY_RATE) -> int:
    """Aplica decay a un camp.

    Returns:
        interacciones descontadas; 0 significa que el camp no cambió
    """
    amount = compute_decay(camp, now, decay_rate)
    if amount <= 0:
        return 0

    camp.last_decay_time = now
    camp.num_interactions = max(camp.num_interactions - amount, 0)
    return amount
