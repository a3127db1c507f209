from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.store import ScoringStoreDB
from database.repositories import (
    CourseRepositoryDB,
    PlayerRepositoryDB,
    RoundRepositoryDB,
    ScoreRepositoryDB,
)
from database.exceptions import DatabaseError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "ScoringStoreDB",
    "CourseRepositoryDB",
    "PlayerRepositoryDB",
    "RoundRepositoryDB",
    "ScoreRepositoryDB",
    "DatabaseError",
    "IntegrityError",
]
