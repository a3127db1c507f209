"""Player handicap lookups for score entry."""

from fastapi import APIRouter, Depends, HTTPException, Query
from uuid import UUID

from api.dependencies import get_scoring_service
from scoring.exceptions import MissingReferenceError
from scoring.service import HandicapSummary, ScoringService

router = APIRouter()


@router.get("/{player_id}/handicap", response_model=HandicapSummary)
async def get_course_handicap(
    player_id: UUID,
    course_id: UUID = Query(...),
    service: ScoringService = Depends(get_scoring_service),
):
    """Course handicap plus strokes received and max score for every hole."""
    try:
        return await service.handicap_summary(str(player_id), str(course_id))
    except MissingReferenceError as e:
        raise HTTPException(404, str(e))
