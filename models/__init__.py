from .base import BaseGolfModel
from .course import Course
from .hole import Hole
from .hole_score import HoleScore, ScoreSubmission
from .leaderboard import LeaderboardEntry, LeaderboardScope, PlayerTotal, RankedEntry
from .player import Player
from .round import Round, RoundStatus, Scorecard
from .tournament import Payout, PayoutType, Tournament

__all__ = [
    "BaseGolfModel",
    "Course",
    "Hole",
    "HoleScore",
    "ScoreSubmission",
    "LeaderboardEntry",
    "LeaderboardScope",
    "PlayerTotal",
    "RankedEntry",
    "Player",
    "Round",
    "RoundStatus",
    "Scorecard",
    "Payout",
    "PayoutType",
    "Tournament",
]
