from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from soccer_results_api.app.models.match import MatchRecord
from soccer_results_api.app.stores.base import MatchStore


class InMemoryMatchStore(MatchStore):
    """Dictionary backed store; contents are lost with the process.

    New identifiers continue after the largest id ever stored, so an id
    is not reused after its record was deleted.  Copies are handed in
    and out so callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._records: Dict[int, MatchRecord] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def put(self, record: MatchRecord) -> MatchRecord:
        with self._lock:
            if record.id is None:
                self._last_id += 1
                match_id = self._last_id
            else:
                match_id = record.id
                self._last_id = max(self._last_id, match_id)
            stored = replace(record, id=match_id)
            self._records[match_id] = stored
            return replace(stored)

    def get(self, match_id: int) -> Optional[MatchRecord]:
        with self._lock:
            record = self._records.get(match_id)
            return replace(record) if record is not None else None

    def get_all(self) -> List[MatchRecord]:
        with self._lock:
            return [replace(record) for _, record in sorted(self._records.items())]

    def delete(self, match_id: int) -> bool:
        with self._lock:
            return self._records.pop(match_id, None) is not None
