from .course_repo import CourseRepositoryDB
from .player_repo import PlayerRepositoryDB
from .round_repo import RoundRepositoryDB
from .score_repo import ScoreRepositoryDB

__all__ = ["CourseRepositoryDB", "PlayerRepositoryDB", "RoundRepositoryDB", "ScoreRepositoryDB"]
