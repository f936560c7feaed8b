"""
Persistence‑level record types.

These are kept apart from the Pydantic schemas in ``app.schemas`` so
that stores do not depend on the API representation.
"""

from .match import MatchRecord

__all__ = ["MatchRecord"]
