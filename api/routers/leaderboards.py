"""Leaderboard endpoints. Computed on every request."""

from fastapi import APIRouter, Depends
from typing import List
from uuid import UUID

from api.dependencies import get_scoring_service
from models import LeaderboardEntry, LeaderboardScope
from scoring.service import ScoringService

router = APIRouter()


@router.get("/tournaments/{tournament_id}/leaderboard", response_model=List[LeaderboardEntry])
async def get_tournament_leaderboard(
    tournament_id: UUID,
    service: ScoringService = Depends(get_scoring_service),
):
    """Overall standings: net strokes summed across every round."""
    scope = LeaderboardScope(tournament_id=str(tournament_id))
    return await service.get_leaderboard(scope)


@router.get("/rounds/{round_id}/leaderboard", response_model=List[LeaderboardEntry])
async def get_round_leaderboard(
    round_id: UUID,
    service: ScoringService = Depends(get_scoring_service),
):
    """Daily standings for a single round."""
    scope = LeaderboardScope(round_id=str(round_id))
    return await service.get_leaderboard(scope)
