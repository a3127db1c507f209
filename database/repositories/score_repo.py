"""Writes and aggregates for the scores table."""

import asyncpg
from typing import List, Sequence

from models import HoleScore, LeaderboardScope, PlayerTotal
from database.converters import (
    hole_score_from_row,
    hole_score_to_row,
    parse_id,
    player_total_from_row,
)
from database.exceptions import IntegrityError

_UPSERT_SCORE = """
    INSERT INTO scores (scorecard_id, user_id, hole_id, strokes, net_strokes)
    VALUES ($1, $2, $3, $4, $5)
    ON CONFLICT (scorecard_id, user_id, hole_id)
    DO UPDATE SET strokes = EXCLUDED.strokes,
                  net_strokes = EXCLUDED.net_strokes
    RETURNING *,
              (SELECT hole_number FROM holes WHERE holes.id = scores.hole_id) AS hole_number
"""

_TOTALS_SELECT = """
    SELECT u.id AS player_id,
           u.first_name,
           u.last_name,
           u.handicap_index,
           SUM(s.net_strokes) AS total_net_strokes,
           SUM(s.strokes) AS total_strokes,
           SUM(h.par) AS par_played,
           COUNT(s.id) AS holes_played,
           COUNT(DISTINCT r.id) AS rounds_played
    FROM scores s
    JOIN scorecards sc ON sc.id = s.scorecard_id
    JOIN rounds r ON r.id = sc.round_id
    JOIN holes h ON h.id = s.hole_id
    JOIN users u ON u.id = s.user_id
"""

_TOTALS_GROUP = """
    GROUP BY u.id, u.first_name, u.last_name, u.handicap_index
    ORDER BY total_net_strokes
"""


class ScoreRepositoryDB:
    """Async writes and leaderboard aggregates for hole scores."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_scores_by_scorecard(self, scorecard_id: str) -> List[HoleScore]:
        """All scores on a scorecard, ordered by hole number."""
        key = parse_id(scorecard_id)
        if key is None:
            return []
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT s.*, h.hole_number FROM scores s
                   JOIN holes h ON h.id = s.hole_id
                   WHERE s.scorecard_id = $1
                   ORDER BY h.hole_number""",
                key,
            )
            return [hole_score_from_row(r) for r in rows]

    async def sum_net_strokes_by_player(self, scope: LeaderboardScope) -> List[PlayerTotal]:
        """Per-player totals across a tournament (all rounds) or a single round."""
        if scope.is_tournament:
            where, scope_id = "WHERE r.tournament_id = $1", scope.tournament_id
        else:
            where, scope_id = "WHERE sc.round_id = $1", scope.round_id
        key = parse_id(scope_id)
        if key is None:
            return []

        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                _TOTALS_SELECT + where + _TOTALS_GROUP, key
            )
            return [player_total_from_row(r) for r in rows]

    # ================================================================
    # Write
    # ================================================================

    async def upsert_hole_scores(self, scores: Sequence[HoleScore]) -> List[HoleScore]:
        """Insert or replace scores by (scorecard, player, hole) in one transaction.

        A resubmission overwrites both gross and net strokes; last write wins.
        """
        saved: List[HoleScore] = []
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    for score in scores:
                        row = await conn.fetchrow(
                            _UPSERT_SCORE, *hole_score_to_row(score)
                        )
                        saved.append(hole_score_from_row(row))
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(str(e)) from e
        return saved
