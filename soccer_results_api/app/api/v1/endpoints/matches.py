"""
Match endpoints for API v1.

These routes expose create, list, read, update and delete operations on
match results.  They only translate between HTTP and
:class:`MatchService`; the rules themselves live in the service.

* ``GET /{match_id}`` answers 404 when the match does not exist.
* ``PUT`` takes the full record, ``id`` included, in the body and
  replaces what is stored.
* ``DELETE /{match_id}`` always answers 204.  The ``X-Delete-Outcome``
  header tells whether the match was deleted, was not there or the
  store failed.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from soccer_results_api.app.schemas.match import MatchCreate, MatchRead, MatchUpdate
from soccer_results_api.app.services.match_service import MatchService

DELETE_OUTCOME_HEADER = "X-Delete-Outcome"

router = APIRouter()


def get_match_service(request: Request) -> MatchService:
    """Return the service the application was built with."""
    return request.app.state.match_service


@router.post("", response_model=MatchRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=MatchRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def add_match(
    match_in: MatchCreate,
    service: MatchService = Depends(get_match_service),
) -> MatchRead:
    """Record a new match and return it with its assigned ``id``."""
    return await service.add_match(match_in)


@router.get("", response_model=List[MatchRead])
@router.get("/", response_model=List[MatchRead], include_in_schema=False)
async def get_all_matches(service: MatchService = Depends(get_match_service)) -> List[MatchRead]:
    """Return every recorded match.  The order carries no meaning."""
    return await service.get_all_matches()


@router.get("/{match_id}", response_model=MatchRead)
async def get_match_by_id(
    match_id: int,
    service: MatchService = Depends(get_match_service),
) -> MatchRead:
    """Retrieve a single match by ID.

    Returns HTTP 404 if the match is not found.
    """
    match = await service.get_match_by_id(match_id)
    if match is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Match not found")
    return match


@router.put("", response_model=MatchRead)
@router.put("/", response_model=MatchRead, include_in_schema=False)
async def update_match(
    match_in: MatchUpdate,
    service: MatchService = Depends(get_match_service),
) -> MatchRead:
    """Replace the match identified by the ``id`` in the body.

    Fields left out of the body are cleared.  An unknown ``id`` creates
    the match.
    """
    return await service.update_match(match_in)


@router.delete("/{match_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_match_by_id(
    match_id: int,
    service: MatchService = Depends(get_match_service),
) -> Response:
    """Delete a match.  Always succeeds from the client's point of view."""
    outcome = await service.delete_match_by_id(match_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={DELETE_OUTCOME_HEADER: outcome.value},
    )
