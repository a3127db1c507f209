from fastapi import Depends, Request

from database.db_manager import DatabaseManager
from scoring.service import ScoringService


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_scoring_service(db: DatabaseManager = Depends(get_db)) -> ScoringService:
    """ScoringService bound to the request's database store."""
    return ScoringService(db.store)
