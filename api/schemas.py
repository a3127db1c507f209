"""API request/response models."""

from pydantic import BaseModel, Field
from typing import List
from uuid import UUID

from models import ScoreSubmission


class ScoreInput(BaseModel):
    """One gross score as posted by the score-entry screen."""
    scorecard_id: UUID
    player_id: UUID
    hole_id: UUID
    strokes: int

    def to_submission(self) -> ScoreSubmission:
        return ScoreSubmission(
            scorecard_id=str(self.scorecard_id),
            player_id=str(self.player_id),
            hole_id=str(self.hole_id),
            strokes=self.strokes,
        )


class SubmitScoresRequest(BaseModel):
    scores: List[ScoreInput] = Field(default_factory=list)


class ValidationFailureResponse(BaseModel):
    """Body of a rejected batch."""
    message: str = "Score validation failed"
    errors: List[str]
