from .exceptions import MissingReferenceError, ScoreValidationError, ScoringError
from .handicap import (
    course_handicap,
    format_score_to_par,
    max_legal_score,
    net_strokes,
    round_net_score,
    score_to_par,
    stroke_allocation,
    strokes_for_hole,
)
from .leaderboard import rank
from .service import HandicapSummary, ScoringService, SubmissionResult
from .store import ScoringStore
from .validator import ScoreValidation, validate_score

__all__ = [
    "ScoringError",
    "MissingReferenceError",
    "ScoreValidationError",
    "course_handicap",
    "strokes_for_hole",
    "net_strokes",
    "max_legal_score",
    "score_to_par",
    "format_score_to_par",
    "stroke_allocation",
    "round_net_score",
    "rank",
    "ScoringService",
    "SubmissionResult",
    "HandicapSummary",
    "ScoringStore",
    "ScoreValidation",
    "validate_score",
]
