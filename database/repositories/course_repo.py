"""Read access to courses and holes for scoring."""

import asyncpg
from typing import Optional

from models import Course, Hole
from database.converters import course_from_rows, hole_from_row, parse_id


class CourseRepositoryDB:
    """Async reads for courses and their holes.

    Ids that are not UUIDs match no row, same as an unknown id.
    """

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_course(self, course_id: str) -> Optional[Course]:
        """Get a course with all of its holes."""
        key = parse_id(course_id)
        if key is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM courses WHERE id = $1", key
            )
            if not row:
                return None
            hole_rows = await conn.fetch(
                "SELECT * FROM holes WHERE course_id = $1 ORDER BY hole_number",
                row["id"],
            )
            return course_from_rows(row, hole_rows)

    async def get_hole(self, hole_id: str) -> Optional[Hole]:
        """Get a single hole; the model carries its course_id."""
        key = parse_id(hole_id)
        if key is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM holes WHERE id = $1", key
            )
            return hole_from_row(row) if row else None
