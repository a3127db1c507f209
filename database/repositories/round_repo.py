"""Read access to rounds and scorecards."""

import asyncpg
from typing import List, Optional

from models import Round, Scorecard
from database.converters import parse_id, round_from_row, scorecard_from_rows


class RoundRepositoryDB:
    """Async reads for rounds and the scorecards (player groups) within them."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_round(self, round_id: str) -> Optional[Round]:
        key = parse_id(round_id)
        if key is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM rounds WHERE id = $1", key
            )
            return round_from_row(row) if row else None

    async def get_scorecards_for_round(self, round_id: str) -> List[Scorecard]:
        """Scorecards in a round with their player ids."""
        key = parse_id(round_id)
        if key is None:
            return []
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT * FROM scorecards WHERE round_id = $1 ORDER BY name",
                key,
            )
            if not rows:
                return []
            player_rows = await conn.fetch(
                """SELECT scorecard_id, user_id FROM scorecard_players
                   WHERE scorecard_id = ANY($1::uuid[])""",
                [r["id"] for r in rows],
            )

        players_by_card = {}
        for pr in player_rows:
            players_by_card.setdefault(pr["scorecard_id"], []).append(pr)
        return [
            scorecard_from_rows(r, players_by_card.get(r["id"], []))
            for r in rows
        ]
