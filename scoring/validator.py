from typing import Optional

from pydantic import BaseModel

from models.hole import Hole
from scoring.handicap import max_legal_score, strokes_for_hole


class ScoreValidation(BaseModel):
    """Outcome of checking one gross score against the double-par limit."""
    valid: bool
    max_score: int
    strokes_received: int
    message: Optional[str] = None


def validate_score(strokes: int, hole: Hole, course_handicap: int) -> ScoreValidation:
    """Check 1 <= strokes <= max legal score for the hole.

    Failures are returned as data; the caller decides what to do with them.
    """
    received = strokes_for_hole(course_handicap, hole.handicap_ranking)
    max_score = max_legal_score(hole.par, received)

    message = None
    if strokes < 1:
        message = "Score must be at least 1 stroke"
    elif strokes > max_score:
        message = (
            f"Maximum score for this hole is {max_score} "
            f"(double par + {received} handicap strokes)"
        )

    return ScoreValidation(
        valid=message is None,
        max_score=max_score,
        strokes_received=received,
        message=message,
    )
