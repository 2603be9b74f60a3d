from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from ..models import QuestResult
from ..repositories import DEFAULT_LIMIT, DEFAULT_PAGE, ListQuery, QuestRepository
from ..scheduling import min_hours_per_day
from ..schemas import (
    GenericResponse,
    QuestCreate,
    QuestData,
    QuestListResponse,
    QuestOut,
    QuestUpdate,
    SingleQuestResponse,
)
from ..utils import list_envelope

router = APIRouter(
    prefix="/api/quests",
    tags=["quests"],
)

_NOT_FOUND = {404: {"model": GenericResponse, "description": "Quest not found"}}


def _get_repo(request: Request) -> QuestRepository:
    """
    Dependency returning the repository owned by the running application.
    """
    return request.app.state.repository


def _single(result: QuestResult, min_hours: Optional[float] = None) -> SingleQuestResponse:
    return SingleQuestResponse(
        data=QuestData(
            quest=QuestOut(**result.quest),
            days_left=result.days_left,
            min_hours_per_day=min_hours,
        )
    )


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=QuestListResponse,
    summary="List Quests",
    description=(
        "List quests in insertion order, one page at a time.\n\n"
        "Query parameters:\n"
        "- page: 1-based page number (default 1)\n"
        "- limit: page size (default 10)\n\n"
        "A page past the end returns an empty list."
    ),
    responses={
        200: {"description": "List retrieved successfully"},
        422: {"description": "Invalid query parameters"},
    },
)
def list_quests(
    page: int = Query(DEFAULT_PAGE, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, description="Maximum number of quests to return"),
    repo: QuestRepository = Depends(_get_repo),
) -> QuestListResponse:
    """
    List quests with page-based pagination.
    """
    quests = repo.list(ListQuery(page=page, limit=limit))
    envelope = list_envelope(QuestOut(**q) for q in quests)
    return QuestListResponse(**envelope)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=SingleQuestResponse,
    response_model_exclude_none=True,
    summary="Create Quest",
    description="Create a new quest and return it together with the working days left until its deadline.",
    responses={
        200: {"description": "Quest created"},
        409: {"model": GenericResponse, "description": "Duplicate title or missing deadline"},
    },
)
def create_quest(payload: QuestCreate, repo: QuestRepository = Depends(_get_repo)) -> SingleQuestResponse:
    """
    Create a new quest.
    """
    return _single(repo.create(payload))


# PUBLIC_INTERFACE
@router.get(
    "/{quest_id}",
    response_model=SingleQuestResponse,
    response_model_exclude_none=True,
    summary="Get Quest",
    description=(
        "Get a single quest by ID.\n\n"
        "When hoursInvested and/or hoursNeeded are given, the response also carries "
        "minHoursPerDay, unless no working days are left."
    ),
    responses={200: {"description": "Quest found"}, **_NOT_FOUND},
)
def get_quest(
    quest_id: str,
    hours_invested: Optional[float] = Query(None, alias="hoursInvested", allow_inf_nan=False, description="Hours already spent"),
    hours_needed: Optional[float] = Query(None, alias="hoursNeeded", allow_inf_nan=False, description="Total hours the quest needs"),
    repo: QuestRepository = Depends(_get_repo),
) -> SingleQuestResponse:
    """
    Retrieve a single quest by its ID.
    """
    result = repo.get(quest_id)
    min_hours = None
    if result.days_left is not None and (hours_invested is not None or hours_needed is not None):
        min_hours = min_hours_per_day(result.days_left, hours_invested, hours_needed)
    return _single(result, min_hours)


# PUBLIC_INTERFACE
@router.patch(
    "/{quest_id}",
    response_model=SingleQuestResponse,
    response_model_exclude_none=True,
    summary="Update Quest",
    description=(
        "Partially update a quest. Omitted fields are left as they are; an empty title "
        "or content is ignored and the deadline cannot be cleared."
    ),
    responses={200: {"description": "Quest updated"}, **_NOT_FOUND},
)
def update_quest(
    quest_id: str, payload: QuestUpdate, repo: QuestRepository = Depends(_get_repo)
) -> SingleQuestResponse:
    """
    Partial update of a quest.
    """
    return _single(repo.update(quest_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{quest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Quest",
    description="Delete a quest by ID.",
    responses={204: {"description": "Quest deleted"}, **_NOT_FOUND},
)
def delete_quest(quest_id: str, repo: QuestRepository = Depends(_get_repo)) -> Response:
    """
    Delete a quest. Returns 204 on success, 404 if not found.
    """
    repo.delete(quest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
