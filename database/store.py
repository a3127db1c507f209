"""Postgres-backed implementation of the scoring storage protocol.

Composes the per-table repositories so ScoringService can stay unaware of
connections and SQL.

Usage:
    store = DatabaseManager(pool).store
    service = ScoringService(store)
    result = await service.submit_scores(batch)
"""

from typing import List, Optional, Sequence

from models import Course, Hole, HoleScore, LeaderboardScope, Player, PlayerTotal
from database.repositories import CourseRepositoryDB, PlayerRepositoryDB, ScoreRepositoryDB


class ScoringStoreDB:
    """Satisfies scoring.store.ScoringStore using the asyncpg repositories."""

    def __init__(
        self,
        players: PlayerRepositoryDB,
        courses: CourseRepositoryDB,
        scores: ScoreRepositoryDB,
    ):
        self._players = players
        self._courses = courses
        self._scores = scores

    async def get_player(self, player_id: str) -> Optional[Player]:
        return await self._players.get_player(player_id)

    async def get_hole(self, hole_id: str) -> Optional[Hole]:
        return await self._courses.get_hole(hole_id)

    async def get_course(self, course_id: str) -> Optional[Course]:
        return await self._courses.get_course(course_id)

    async def upsert_hole_scores(self, scores: Sequence[HoleScore]) -> List[HoleScore]:
        return await self._scores.upsert_hole_scores(scores)

    async def sum_net_strokes_by_player(self, scope: LeaderboardScope) -> List[PlayerTotal]:
        return await self._scores.sum_net_strokes_by_player(scope)
