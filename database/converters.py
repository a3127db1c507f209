"""Conversion between asyncpg database rows and Pydantic domain models.

Centralizes all mapping logic between the normalized DB schema
and the domain models. UUID columns become str ids on the models.
"""

from typing import Optional, Tuple
from uuid import UUID

from models import (
    Course,
    Hole,
    HoleScore,
    Player,
    PlayerTotal,
    Round,
    Scorecard,
)


# ================================================================
# Row -> Model (reads)
# ================================================================

def parse_id(value: str) -> Optional[UUID]:
    """str id -> UUID, or None when the text cannot be a row id."""
    try:
        return UUID(value)
    except (TypeError, ValueError):
        return None


def player_from_row(row) -> Player:
    """users row -> Player model."""
    return Player(
        id=str(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        handicap_index=float(row["handicap_index"]),
        is_admin=row["is_admin"],
        created_at=row["created_at"],
    )


def hole_from_row(row) -> Hole:
    """holes row -> Hole model."""
    return Hole(
        id=str(row["id"]),
        course_id=str(row["course_id"]),
        number=row["hole_number"],
        par=row["par"],
        handicap_ranking=row["handicap_ranking"],
        yardage=row["yardage"],
    )


def course_from_rows(course_row, hole_rows: list) -> Course:
    """Assemble a Course from its row and its hole rows."""
    holes = sorted(
        [hole_from_row(r) for r in hole_rows],
        key=lambda h: h.number,
    )
    return Course(
        id=str(course_row["id"]),
        name=course_row["name"],
        location=course_row["location"],
        par=course_row["par"],
        yardage=course_row["yardage"],
        slope_rating=course_row["slope_rating"],
        course_rating=float(course_row["course_rating"]),
        holes=holes,
    )


def hole_score_from_row(row) -> HoleScore:
    """scores row (optionally joined with holes.hole_number) -> HoleScore model."""
    return HoleScore(
        id=str(row["id"]),
        scorecard_id=str(row["scorecard_id"]),
        player_id=str(row["user_id"]),
        hole_id=str(row["hole_id"]),
        hole_number=row.get("hole_number"),
        strokes=row["strokes"],
        net_strokes=row["net_strokes"],
        created_at=row["created_at"],
    )


def player_total_from_row(row) -> PlayerTotal:
    """Leaderboard aggregate row -> PlayerTotal."""
    first, last = row["first_name"], row["last_name"]
    name = " ".join(p for p in (first, last) if p) or None
    handicap = row["handicap_index"]
    return PlayerTotal(
        player_id=str(row["player_id"]),
        display_name=name,
        handicap_index=float(handicap) if handicap is not None else None,
        total_net_strokes=row["total_net_strokes"] or 0,
        total_strokes=row["total_strokes"] or 0,
        par_played=row["par_played"] or 0,
        holes_played=row["holes_played"] or 0,
        rounds_played=row["rounds_played"] or 0,
    )


def round_from_row(row) -> Round:
    """rounds row -> Round model."""
    return Round(
        id=str(row["id"]),
        tournament_id=str(row["tournament_id"]),
        course_id=str(row["course_id"]),
        round_number=row["round_number"],
        date=row["round_date"],
        status=row["status"],
    )


def scorecard_from_rows(row, player_rows: list) -> Scorecard:
    """scorecards row + scorecard_players rows -> Scorecard model."""
    return Scorecard(
        id=str(row["id"]),
        round_id=str(row["round_id"]),
        name=row["name"],
        player_ids=[str(r["user_id"]) for r in player_rows],
    )


# ================================================================
# Model -> Row tuple (writes)
# ================================================================

def hole_score_to_row(score: HoleScore) -> Tuple[UUID, UUID, UUID, int, int]:
    """HoleScore -> (scorecard_id, user_id, hole_id, strokes, net_strokes)."""
    return (
        UUID(score.scorecard_id),
        UUID(score.player_id),
        UUID(score.hole_id),
        score.strokes,
        score.net_strokes,
    )
