from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class MatchRecord:
    """Stored representation of one match.

    ``id`` is ``None`` until a store assigns one.  Team names and scores
    are all optional; a match may be recorded before it is played.
    """

    id: Optional[int] = None
    team_one: Optional[str] = None
    team_two: Optional[str] = None
    score_one: Optional[int] = None
    score_two: Optional[int] = None
