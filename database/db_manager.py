import asyncpg
import logging
from pathlib import Path
from typing import Optional

from database.exceptions import DatabaseError
from database.repositories import (
    CourseRepositoryDB,
    PlayerRepositoryDB,
    RoundRepositoryDB,
    ScoreRepositoryDB,
)
from database.store import ScoringStoreDB

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Entry point to the data-access layer.

    Notes:
    - Raw SQL through asyncpg (no ORM) to keep behavior explicit.
    - One instance per pool; repositories share the pool.
    """

    def __init__(self, pool: asyncpg.Pool, schema_path: Optional[str] = None) -> None:
        self._pool = pool
        self.schema_path = Path(
            schema_path or Path(__file__).with_name("schema.sql")
        ).resolve()
        self.players = PlayerRepositoryDB(pool)
        self.courses = CourseRepositoryDB(pool)
        self.rounds = RoundRepositoryDB(pool)
        self.scores = ScoreRepositoryDB(pool)
        self.store = ScoringStoreDB(self.players, self.courses, self.scores)

    async def initialize_schema(self) -> None:
        """Create tables defined in `database/schema.sql`.

        Every statement is IF NOT EXISTS, so calling this on each startup is safe.
        """
        if not self.schema_path.exists():
            raise DatabaseError(f"Schema file not found: {self.schema_path}")

        sql_text = self.schema_path.read_text(encoding="utf-8")
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(sql_text)
        logger.info("Schema ensured from %s", self.schema_path.name)
