"""
Pydantic schemas for match records.

The API speaks camelCase (``teamOne``, ``scoreTwo``, ...) while the
Python attributes are snake_case.  Every field declares its wire name
as an alias; payloads may use either form and responses are always
rendered with the aliases.

Integers are bounded to what the database can hold, so an oversized
score or id is rejected with a 422 instead of failing in storage.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from soccer_results_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN


class MatchBase(BaseModel):
    """Fields shared by all match payloads.

    None of them is required: a match can be recorded before it is
    played, and team names are free text.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    team_one: Optional[str] = Field(None, alias="teamOne", examples=["Olympique Lyonnais"])
    team_two: Optional[str] = Field(None, alias="teamTwo", examples=["AS Saint-Étienne"])
    score_one: Optional[int] = Field(
        None, alias="scoreOne", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[2]
    )
    score_two: Optional[int] = Field(
        None, alias="scoreTwo", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1]
    )


class MatchCreate(MatchBase):
    """Schema for recording a new match.

    There is no ``id`` field; an ``id`` sent by the client is ignored and
    the store assigns one.
    """


class MatchUpdate(MatchBase):
    """Schema for replacing a stored match.

    The whole record is replaced: fields left out are stored as empty,
    they do not keep their previous values.
    """

    id: int = Field(
        ...,
        ge=SQLITE_INTEGER_MIN,
        le=SQLITE_INTEGER_MAX,
        description="Identifier of the match to replace",
        examples=[1],
    )


class MatchRead(MatchBase):
    """Schema for reading a match."""

    id: int
