"""USGA course-handicap math and per-hole stroke allocation.

Everything here is pure: no I/O, no state, and no exceptions for well-typed
input.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Tuple

from models.hole import Hole

NEUTRAL_SLOPE = 113
HOLES_PER_ALLOCATION = 18


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def course_handicap(
    handicap_index: float,
    slope_rating: int,
    course_rating: float,
    par: int,
) -> int:
    """
    Course Handicap = (Handicap Index x Slope Rating / 113) + (Course Rating - Par)

    Rounded once at the end and clamped to zero: a course handicap is never
    negative, even for plus handicaps on a course rated below par.
    """
    raw = (handicap_index * slope_rating / NEUTRAL_SLOPE) + (course_rating - par)
    return max(0, round_half_up(raw))


def strokes_for_hole(course_handicap: int, hole_handicap_ranking: int) -> int:
    """Handicap strokes a player receives on a hole of the given difficulty ranking."""
    if course_handicap < hole_handicap_ranking:
        return 0
    return 1 + (course_handicap - hole_handicap_ranking) // HOLES_PER_ALLOCATION


def net_strokes(gross_strokes: int, strokes_received: int) -> int:
    return max(0, gross_strokes - strokes_received)


def max_legal_score(par: int, strokes_received: int) -> int:
    """Double par, plus any handicap strokes received on the hole."""
    return (par * 2) + strokes_received


def score_to_par(total_strokes: int, par: int) -> int:
    return total_strokes - par


def format_score_to_par(value: int) -> str:
    """Format a to-par value for display ("E", "+2", "-1")."""
    if value == 0:
        return "E"
    return f"+{value}" if value > 0 else str(value)


def stroke_allocation(course_handicap: int, holes: Iterable[Hole]) -> Dict[int, int]:
    """Map hole number -> handicap strokes received for a whole course."""
    return {
        hole.number: strokes_for_hole(course_handicap, hole.handicap_ranking)
        for hole in holes
    }


def round_net_score(
    scores: Iterable[Tuple[int, int]],
    course_handicap: int,
) -> int:
    """
    Total net strokes for a round.

    scores: (gross_strokes, hole_handicap_ranking) pairs, one per hole played.
    """
    total = 0
    for gross, ranking in scores:
        total += net_strokes(gross, strokes_for_hole(course_handicap, ranking))
    return total
