"""Score submission endpoints."""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from typing import List
from uuid import UUID

from api.dependencies import get_db, get_scoring_service
from api.schemas import SubmitScoresRequest, ValidationFailureResponse
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError
from models import HoleScore
from scoring.exceptions import MissingReferenceError
from scoring.service import ScoringService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/scores",
    response_model=List[HoleScore],
    responses={400: {"model": ValidationFailureResponse}},
)
async def submit_scores(
    req: SubmitScoresRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Save a batch of hole scores. Any invalid score rejects the whole batch."""
    batch = [s.to_submission() for s in req.scores]
    try:
        result = await service.submit_scores(batch)
    except MissingReferenceError as e:
        raise HTTPException(404, str(e))
    except IntegrityError as e:
        logger.warning("Score batch hit a constraint: %s", e)
        raise HTTPException(409, "Scores reference data that no longer exists")

    if not result.accepted:
        body = ValidationFailureResponse(errors=result.errors)
        return JSONResponse(status_code=400, content=body.model_dump())
    return result.scores


@router.get("/scorecards/{scorecard_id}/scores", response_model=List[HoleScore])
async def get_scorecard_scores(scorecard_id: UUID, db: DatabaseManager = Depends(get_db)):
    return await db.scores.get_scores_by_scorecard(str(scorecard_id))
