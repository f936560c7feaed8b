"""
Storage backends for match records.

``MatchStore`` is the capability interface the service layer depends
on.  ``SqliteMatchStore`` is the relational backend used by the
application; ``InMemoryMatchStore`` holds records in a dictionary and
is handy for tests and throwaway instances.
"""

from .base import MatchStore
from .memory import InMemoryMatchStore
from .sqlite import SqliteMatchStore

__all__ = ["MatchStore", "InMemoryMatchStore", "SqliteMatchStore"]
