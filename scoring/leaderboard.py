from __future__ import annotations

from typing import Iterable, List

from models.leaderboard import PlayerTotal, RankedEntry


def rank(totals: Iterable[PlayerTotal]) -> List[RankedEntry]:
    """
    Order players by total net strokes (lowest first) and assign positions.

    Tied players share a position, and the next distinct score takes the slot
    after everyone ahead of it: 70, 70, 72 -> 1, 1, 3. Players with no scored
    holes are left off entirely. Within a tie the input order is kept.
    """
    scored = [t for t in totals if t.holes_played > 0]
    ordered = sorted(scored, key=lambda t: t.total_net_strokes)

    results: List[RankedEntry] = []
    position = 0
    for index, total in enumerate(ordered):
        if index == 0 or total.total_net_strokes != ordered[index - 1].total_net_strokes:
            position = index + 1
        results.append(
            RankedEntry(
                player_id=total.player_id,
                total_net_strokes=total.total_net_strokes,
                position=position,
            )
        )
    return results
