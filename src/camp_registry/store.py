"""In-memory camp store. Un actor = un store."""

from __future__ import annotations

import collections
import threading
from dataclasses import replace

from camp_registry.models import CampRecord, Trace

MAX_TRACES = 1000


class CampStore:
    """Record set for one actor. Holds the actor's lock."""

    def __init__(self, owner_id: int, max_traces: int = MAX_TRACES) -> None:
        self.owner_id = owner_id
        self.lock = threading.RLock()
        self._camps: dict[int, CampRecord] = {}
        self._traces: collections.deque[Trace] = collections.deque(maxlen=max_traces)

    # ── Camp CRUD ──────────────────────────────────────────────────────

    def get(self, camp_id: int) -> CampRecord | None:
        with self.lock:
            return self._camps.get(camp_id)

    def get_or_create(self, camp_id: int, now: int) -> tuple[CampRecord, bool]:
        with self.lock:
            camp = self._camps.get(camp_id)
            if camp is not None:
                return camp, False
            camp = CampRecord(
                camp_id=camp_id,
                owner_id=self.owner_id,
                num_interactions=0,
                last_decay_time=now,
            )
            self._camps[camp_id] = camp
            return camp, True

    def erase(self, camp_id: int) -> bool:
        with self.lock:
            return self._camps.pop(camp_id, None) is not None

    def erase_all(self) -> list[int]:
        """Removes every camp. Returns the erased ids."""
        with self.lock:
            erased = list(self._camps)
            self._camps.clear()
            return erased

    def all_camps(self) -> list[CampRecord]:
        """Copies, ordered by camp id. Mutating them does not touch the store."""
        with self.lock:
            return [replace(camp) for _, camp in sorted(self._camps.items())]

    def count(self) -> int:
        with self.lock:
            return len(self._camps)

    # ── Traces ─────────────────────────────────────────────────────────

    def save_trace(self, trace: Trace) -> None:
        with self.lock:
            self._traces.append(trace)

    def load_traces(self, operation: str | None = None,
                    camp_id: int | None = None,
                    limit: int = 100) -> list[Trace]:
        """Newest first."""
        with self.lock:
            result = []
            for trace in reversed(self._traces):
                if operation is not None and trace.operation != operation:
                    continue
                if camp_id is not None and trace.camp_id != camp_id:
                    continue
                result.append(trace)
                if len(result) >= limit:
                    break
            return result
