"""Read access to the users table for scoring."""

import asyncpg
from typing import Optional

from models import Player
from database.converters import parse_id, player_from_row


class PlayerRepositoryDB:
    """Async reads for players. Player CRUD lives outside the scoring engine."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by ID. Ids that are not UUIDs match no row."""
        key = parse_id(player_id)
        if key is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users WHERE id = $1", key
            )
            return player_from_row(row) if row else None
