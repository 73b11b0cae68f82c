"""CampRegistry: the core class. Anti-farming bookkeeping for one actor."""

from __future__ import annotations

import logging
import time
from typing import Callable

from camp_registry.decay import DEFAULT_DECAY_RATE
from camp_registry.decay import apply_decay as decay_camp
from camp_registry.models import (
    UINT32_MAX, CampBonus, CampRecord, Trace, max_interactions,
)
from camp_registry.store import CampStore
from camp_registry.subjects import (
    REST_CAMP_ID, Actor, Creature, area_camp_id, type_camp_id,
)

log = logging.getLogger(__name__)

# Type: returns Unix seconds
Clock = Callable[[], float]
# Type: camp id -> max interactions
CapFn = Callable[[int], int]

# Owner id for records of a registry without an actor
DEFAULT_OWNER_ID = 1


def _check_unsigned(name: str, value: int) -> None:
    """Counts and amounts are uint32."""
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


class CampRegistry:
    """El registro de camps de un actor. Un actor = un registry.

    API:
        registry.handle_interaction_event(creature)  : bonus + farming
        registry.increment(camp_id)       : una interacción más
        registry.decrement(camp_id)       : una interacción menos
        registry.set_interactions(id, n)  : fijar el contador
        registry.erase_record(camp_id)    : borrar un camp
        registry.erase_all()              : borrar todos
        registry.check_decay(camp_id)     : decay perezoso
        registry.records()                : copias, solo lectura
        registry.traces()                 : consultar trazas de operaciones
    """

    def __init__(self, actor: Actor | None = None,
                 clock: Clock = time.time,
                 decay_rate: float = DEFAULT_DECAY_RATE,
                 max_interactions_fn: CapFn = max_interactions,
                 logger: logging.Logger | None = None,
                 enable_traces: bool = False,
                 _store: CampStore | None = None) -> None:
        self._actor = actor
        self._clock = clock
        self._decay_rate = decay_rate
        self._max_interactions = max_interactions_fn
        self._log = logger or log
        self._enable_traces = enable_traces
        self._store = _store or CampStore(self.owner_id)

    @property
    def name(self) -> str:
        return self._actor.name if self._actor is not None else ""

    @property
    def owner_id(self) -> int:
        return self._actor.guid if self._actor is not None else DEFAULT_OWNER_ID

    # ── lookup ─────────────────────────────────────────────────────────

    def has_record(self, camp_id: int) -> bool:
        found = self.get_record(camp_id) is not None
        self._log.debug(f"{self.name}.CampRegistry.has_record({camp_id}): {found}")
        return found

    def get_record(self, camp_id: int) -> CampRecord | None:
        """Returns the live record, or None. Never creates."""
        return self._store.get(camp_id)

    def get_or_create(self, camp_id: int) -> tuple[CampRecord, bool]:
        """(record, was_created). New records start at 0 interactions."""
        return self._store.get_or_create(camp_id, self._now())

    def records(self) -> list[CampRecord]:
        """Copias de todos los camps, para diagnóstico. No mutar."""
        return self._store.all_camps()

    def max_interactions(self, camp_id: int) -> int:
        return self._max_interactions(camp_id)

    def has_max_interactions(self, camp_id: int) -> bool:
        return self._at_cap(self.get_record(camp_id))

    def current_interactions(self, camp_id: int) -> int:
        camp = self.get_record(camp_id)
        if camp is None:
            return 0
        return camp.num_interactions

    # ── mutation ───────────────────────────────────────────────────────

    def set_interactions(self, camp_id: int, value: int = 0) -> CampRecord:
        """Fija el contador, acotado al máximo del camp."""
        _check_unsigned("value", value)
        t0 = time.time()
        with self._store.lock:
            camp, _ = self.get_or_create(camp_id)
            camp.num_interactions = min(value, self.max_interactions(camp_id))
            camp.last_decay_time = self._now()
            self._mark_dirty()

        self._log.debug(f"{self.name}.CampRegistry.set_interactions({camp_id}): "
                        f"set camp interactions to {camp.num_interactions}")
        self._trace("set_interactions", camp_id,
                    f"{camp.num_interactions} interactions", t0)
        return camp

    def increment(self, camp_id: int, amount: int = 1) -> CampRecord:
        _check_unsigned("amount", amount)
        t0 = time.time()
        with self._store.lock:
            camp, _ = self.get_or_create(camp_id)
            updated = self._increment(camp, amount)

        self._trace("increment", camp_id,
                    f"{camp.num_interactions} interactions"
                    if updated else "at max interactions", t0)
        return camp

    def decrement(self, camp_id: int, amount: int = 1) -> CampRecord | None:
        """Resta interacciones. Sin camp no hace nada."""
        _check_unsigned("amount", amount)
        t0 = time.time()
        with self._store.lock:
            camp = self.get_record(camp_id)
            if camp is None:
                return None
            self._decrement(camp, amount)

        self._trace("decrement", camp_id,
                    f"{camp.num_interactions} interactions", t0)
        return camp

    def erase_record(self, camp_id: int) -> bool:
        t0 = time.time()
        self._log.debug(f"{self.name}.CampRegistry.erase_record({camp_id})")
        erased = self._store.erase(camp_id)
        if erased:
            self._mark_dirty()

        self._trace("erase_record", camp_id,
                    "erased" if erased else "not found", t0)
        return erased

    def erase_all(self) -> int:
        """Borra todos los camps. Devuelve cuántos. Una sola señal dirty."""
        t0 = time.time()
        self._log.debug(f"{self.name}.CampRegistry.erase_all")
        erased = self._store.erase_all()
        if erased:
            self._mark_dirty()

        self._trace("erase_all", None, f"{len(erased)} erased", t0)
        return len(erased)

    # ── decay ──────────────────────────────────────────────────────────

    def apply_decay(self, camp: CampRecord) -> int:
        """Decay perezoso: solo corre cuando algo toca el camp."""
        with self._store.lock:
            amount = decay_camp(camp, self._now(), self._decay_rate)
            if amount > 0:
                self._log.debug(f"{self.name}.CampRegistry.apply_decay({camp.camp_id}): "
                                f"updated camp interactions to ({camp.num_interactions})")
                self._mark_dirty()
        return amount

    def check_decay(self, camp_id: int) -> CampRecord | None:
        camp = self.get_record(camp_id)
        if camp is not None:
            self.apply_decay(camp)
        return camp

    # ── interaction ────────────────────────────────────────────────────

    def handle_interaction_event(self, creature: Creature | None) -> CampBonus:
        """Registra una interacción con una criatura y devuelve el bonus por camp.

        Para cada camp aplicable (tipo, área, descanso): decay, leer el bonus
        con el contador previo al evento, e incrementar.
        Sin criatura o sin landblock: error en el log, bonus a 0, nada cambia.
        """
        t0 = time.time()
        if creature is None:
            self._log.error(f"{self.name}.CampRegistry.handle_interaction_event: "
                            f"input creature is None!")
            return CampBonus()
        if creature.landblock is None:
            self._log.error(f"{self.name}.CampRegistry.handle_interaction_event: "
                            f"creature has no landblock!")
            return CampBonus()

        type_id = type_camp_id(creature)
        area_id = area_camp_id(creature.landblock)

        with self._store.lock:
            type_bonus = self._interact(type_id) if type_id != 0 else 0.0
            area_bonus = self._interact(area_id) if area_id != 0 else 0.0
            rest_bonus = self._interact(REST_CAMP_ID)

        bonus = CampBonus(type_bonus, area_bonus, rest_bonus)
        self._trace("interaction", None,
                    f"type={type_bonus:.3f} area={area_bonus:.3f} "
                    f"rest={rest_bonus:.3f}", t0)
        return bonus

    # ── diagnostics ────────────────────────────────────────────────────

    def describe(self) -> list[str]:
        """Listado de camps para administración."""
        camps = self.records()
        if not camps:
            return [f"No camps for {self.name}"]

        lines = []
        for camp in camps:
            lines.append(f"CampId: {camp.camp_id}")
            lines.append(f"NumInteractions: {camp.num_interactions}")
            lines.append(f"LastDecayTime: {camp.last_decay_time}")
            lines.append(f"Player ID: {camp.owner_id:08X}")
            lines.append("----")
        return lines

    # ── traces (observability) ─────────────────────────────────────────

    def _trace(self, operation: str, camp_id: int | None,
               output_text: str, t0: float) -> None:
        """Registra un trace si enable_traces=True."""
        if not self._enable_traces:
            return
        duration_ms = (time.time() - t0) * 1000
        self._store.save_trace(Trace(
            operation=operation,
            camp_id=camp_id,
            output_text=output_text[:500],
            duration_ms=duration_ms,
        ))

    def traces(self, operation: str | None = None,
               camp_id: int | None = None,
               limit: int = 100) -> list[Trace]:
        """Consulta trazas de operaciones."""
        return self._store.load_traces(
            operation=operation, camp_id=camp_id, limit=limit,
        )

    # ── internals ──────────────────────────────────────────────────────

    def _now(self) -> int:
        return int(self._clock())

    def _mark_dirty(self) -> None:
        if self._actor is not None:
            self._actor.mark_changes_pending()

    def _at_cap(self, camp: CampRecord | None) -> bool:
        if camp is None:
            return False
        return camp.num_interactions == self.max_interactions(camp.camp_id)

    def _increment(self, camp: CampRecord, amount: int = 1) -> bool:
        """Returns False when the camp was already at its max."""
        if self._at_cap(camp):
            self._log.debug(f"{self.name}.CampRegistry.increment({camp.camp_id}): "
                            f"can not update existing camp, at max interactions")
            return False

        max_amount = self.max_interactions(camp.camp_id)
        step = min(amount, max_amount)
        total = camp.num_interactions + step

        camp.last_decay_time = self._now()
        if max_amount == UINT32_MAX and total > UINT32_MAX:
            # would wrap around as uint32
            camp.num_interactions = max_amount
        elif total >= max_amount:
            camp.num_interactions = max_amount
        else:
            camp.num_interactions = total

        self._log.debug(f"{self.name}.CampRegistry.increment({camp.camp_id}): "
                        f"updated camp interactions({camp.num_interactions})")
        self._mark_dirty()
        return True

    def _decrement(self, camp: CampRecord, amount: int = 1) -> None:
        camp.num_interactions = max(camp.num_interactions - amount, 0)
        self._log.debug(f"{self.name}.CampRegistry.decrement({camp.camp_id}): "
                        f"updated camp interactions to ({camp.num_interactions})")
        self._mark_dirty()

    def _interact(self, camp_id: int) -> float:
        camp, _ = self.get_or_create(camp_id)
        self.apply_decay(camp)
        bonus = 1.0 - camp.num_interactions / self.max_interactions(camp_id)
        self._increment(camp)
        return bonus

    @property
    def count(self) -> int:
        """Cuántos camps hay."""
        return self._store.count()

    def __repr__(self) -> str:
        return f"CampRegistry(owner={self.owner_id:08X}, camps={self.count})"
