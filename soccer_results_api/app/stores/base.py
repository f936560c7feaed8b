from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from soccer_results_api.app.models.match import MatchRecord


class MatchStore(ABC):
    """Abstract keyed storage for :class:`MatchRecord` entities.

    Implementations raise :class:`~soccer_results_api.app.core.errors.StorageError`
    when the backing storage cannot complete an operation.  A missing
    record is never an error.
    """

    @abstractmethod
    def put(self, record: MatchRecord) -> MatchRecord:
        """Persist ``record`` and return the stored copy.

        A record without ``id`` gets a new, never used identifier.  A
        record with ``id`` replaces whatever is stored under it, or is
        created there when nothing is.
        """

    @abstractmethod
    def get(self, match_id: int) -> Optional[MatchRecord]:
        """Return the record stored under ``match_id`` or ``None``."""

    @abstractmethod
    def get_all(self) -> List[MatchRecord]:
        """Return every stored record."""

    @abstractmethod
    def delete(self, match_id: int) -> bool:
        """Remove the record under ``match_id``.

        Returns ``True`` if a record was removed and ``False`` if there
        was nothing to remove.
        """
