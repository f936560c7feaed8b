"""
Service layer for match results.

``MatchService`` is the single place where rules about matches live.
At the moment it mostly forwards to the store, with three decisions
made here:

* a lookup that finds nothing returns ``None`` rather than raising;
* an update replaces the whole record (fields not sent are cleared)
  and creates the record if its id is unknown;
* a delete never raises.  Storage failures are logged and reported
  through :class:`DeleteOutcome` instead.

Any other ``StorageError`` propagates to the caller.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from soccer_results_api.app.core.errors import StorageError
from soccer_results_api.app.models.match import MatchRecord
from soccer_results_api.app.schemas.match import MatchCreate, MatchRead, MatchUpdate
from soccer_results_api.app.stores.base import MatchStore


class DeleteOutcome(str, Enum):
    """What happened to a delete request."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    STORAGE_FAILED = "storage_failed"


class MatchService:
    """Service class for recording and querying match results."""

    def __init__(self, store: MatchStore) -> None:
        self.store = store

    async def add_match(self, data: MatchCreate) -> MatchRead:
        """Store a new match and return it with its assigned ``id``.

        Team names and scores are accepted as given.
        """
        logger = logging.getLogger(__name__)
        record = self.store.put(self._to_record(data, match_id=None))
        logger.info("Created match %s", record.id)
        return self._record_to_read(record)

    async def get_all_matches(self) -> List[MatchRead]:
        return [self._record_to_read(record) for record in self.store.get_all()]

    async def get_match_by_id(self, match_id: int) -> Optional[MatchRead]:
        """Return the match with ``match_id`` or ``None`` if there is none."""
        record = self.store.get(match_id)
        if record is None:
            return None
        return self._record_to_read(record)

    async def update_match(self, data: MatchUpdate) -> MatchRead:
        """Replace the match identified by ``data.id``.

        This is a full replacement, not a merge.  When no match has that
        id yet, one is created under it.
        """
        logger = logging.getLogger(__name__)
        record = self.store.put(self._to_record(data, match_id=data.id))
        logger.info("Updated match %s", record.id)
        return self._record_to_read(record)

    async def delete_match_by_id(self, match_id: int) -> DeleteOutcome:
        """Delete the match with ``match_id``.

        Never raises; the returned outcome tells whether a record was
        removed, was already absent or the store failed.
        """
        logger = logging.getLogger(__name__)
        try:
            removed = self.store.delete(match_id)
        except StorageError:
            logger.exception("Failed to delete match %s", match_id)
            return DeleteOutcome.STORAGE_FAILED
        if not removed:
            logger.info("Match %s not found, nothing deleted", match_id)
            return DeleteOutcome.NOT_FOUND
        logger.info("Deleted match %s", match_id)
        return DeleteOutcome.DELETED

    @staticmethod
    def _to_record(data: MatchCreate | MatchUpdate, match_id: Optional[int]) -> MatchRecord:
        return MatchRecord(
            id=match_id,
            team_one=data.team_one,
            team_two=data.team_two,
            score_one=data.score_one,
            score_two=data.score_two,
        )

    @staticmethod
    def _record_to_read(record: MatchRecord) -> MatchRead:
        """Convert a stored record to a ``MatchRead`` schema instance."""
        return MatchRead(
            id=record.id,
            team_one=record.team_one,
            team_two=record.team_two,
            score_one=record.score_one,
            score_two=record.score_two,
        )
