from typing import List, Optional, Protocol, Sequence

from models import Course, Hole, HoleScore, LeaderboardScope, Player, PlayerTotal


class ScoringStore(Protocol):
    """Storage operations the scoring service depends on.

    Implementors provide the actual DB queries.
    Any class with matching method signatures satisfies this protocol.
    """

    async def get_player(self, player_id: str) -> Optional[Player]:
        ...

    async def get_hole(self, hole_id: str) -> Optional[Hole]:
        """Look up a hole; the returned Hole carries its course_id."""
        ...

    async def get_course(self, course_id: str) -> Optional[Course]:
        ...

    async def upsert_hole_scores(self, scores: Sequence[HoleScore]) -> List[HoleScore]:
        """Insert or replace each score by (scorecard_id, player_id, hole_id).

        All rows are written in one transaction; returns the persisted records.
        """
        ...

    async def sum_net_strokes_by_player(self, scope: LeaderboardScope) -> List[PlayerTotal]:
        """Aggregate persisted net strokes per player within a tournament or round."""
        ...
