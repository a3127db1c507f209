"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from uuid import UUID

from api.dependencies import get_db
from database.db_manager import DatabaseManager
from models import Round, Scorecard

router = APIRouter()


@router.get("/{round_id}", response_model=Round)
async def get_round(round_id: UUID, db: DatabaseManager = Depends(get_db)):
    round_ = await db.rounds.get_round(str(round_id))
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_


@router.get("/{round_id}/scorecards", response_model=List[Scorecard])
async def get_round_scorecards(round_id: UUID, db: DatabaseManager = Depends(get_db)):
    return await db.rounds.get_scorecards_for_round(str(round_id))
