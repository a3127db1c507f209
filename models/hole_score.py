from datetime import datetime
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class ScoreSubmission(BaseGolfModel):
    """One gross score in a submitted batch. Net strokes are never supplied."""
    scorecard_id: str
    player_id: str
    hole_id: str
    strokes: int


class HoleScore(BaseGolfModel):
    """A persisted score for one (scorecard, player, hole).

    net_strokes is derived at write time from the player's course handicap and
    the hole's handicap ranking; it is not recomputed if the handicap index
    changes afterwards.
    """
    id: Optional[str] = None
    scorecard_id: str
    player_id: str
    hole_id: str
    hole_number: Optional[int] = Field(None, ge=1, le=18)
    strokes: int = Field(..., ge=1)
    net_strokes: int = Field(..., ge=0)
    created_at: Optional[datetime] = None

    @property
    def key(self) -> tuple:
        return (self.scorecard_id, self.player_id, self.hole_id)
