import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError

from models import (
    Course,
    Hole,
    HoleScore,
    LeaderboardScope,
    Payout,
    PayoutType,
    Player,
    Round,
    RoundStatus,
    Tournament,
)


def _holes():
    return [Hole(number=i, par=4, handicap_ranking=19 - i) for i in range(1, 19)]


# ================================================================
# Hole / Course
# ================================================================

def test_hole_validation():
    h = Hole(number=1, par=4, handicap_ranking=18)
    assert h.number == 1

    with pytest.raises(ValidationError):
        Hole(number=1, par=7, handicap_ranking=1)     # par > 6

    with pytest.raises(ValidationError):
        Hole(number=1, par=4, handicap_ranking=19)    # ranking > 18

    with pytest.raises(ValidationError):
        Hole(number=19, par=4, handicap_ranking=1)


def test_course_requires_ratings():
    with pytest.raises(ValidationError):
        Course(par=72, course_rating=71.0)             # no slope

    with pytest.raises(ValidationError):
        Course(par=72, slope_rating=160, course_rating=71.0)

    c = Course(par=72, slope_rating=113, course_rating=72.0)
    assert c.holes == []


def test_course_rejects_duplicate_rankings():
    holes = _holes()
    holes[1] = Hole(number=2, par=4, handicap_ranking=18)  # hole 1 already has 18
    with pytest.raises(ValidationError):
        Course(par=72, slope_rating=113, course_rating=72.0, holes=holes)


def test_course_rejects_duplicate_numbers():
    holes = [Hole(number=1, par=4, handicap_ranking=1),
             Hole(number=1, par=4, handicap_ranking=2)]
    with pytest.raises(ValidationError):
        Course(par=72, slope_rating=113, course_rating=72.0, holes=holes)


def test_course_accepts_full_layout():
    course = Course(par=72, slope_rating=113, course_rating=72.0, holes=_holes())
    assert len(course.holes) == 18
    assert {h.handicap_ranking for h in course.holes} == set(range(1, 19))


# ================================================================
# Player / HoleScore
# ================================================================

def test_player_display_name_and_range():
    p = Player(id="p1", first_name="Ann", last_name="Lee", handicap_index=12.5)
    assert p.display_name == "Ann Lee"
    assert Player(id="p2", handicap_index=0).display_name == "p2"

    with pytest.raises(ValidationError):
        p.handicap_index = 60
    assert p.handicap_index == 12.5


def test_hole_score_constraints():
    hs = HoleScore(scorecard_id="s", player_id="p", hole_id="h", strokes=5, net_strokes=4)
    assert hs.key == ("s", "p", "h")

    with pytest.raises(ValidationError):
        HoleScore(scorecard_id="s", player_id="p", hole_id="h", strokes=0, net_strokes=0)

    with pytest.raises(ValidationError):
        HoleScore(scorecard_id="s", player_id="p", hole_id="h", strokes=3, net_strokes=-1)


# ================================================================
# Tournament / Round / Scope
# ================================================================

def test_tournament_dates():
    t = Tournament(name="Club Champs", start_date=date(2026, 6, 1),
                   end_date=date(2026, 6, 3), daily_buy_in=Decimal("20"))
    assert t.is_active
    with pytest.raises(ValidationError):
        Tournament(name="Backwards", start_date=date(2026, 6, 3), end_date=date(2026, 6, 1))


def test_round_status_default():
    r = Round(tournament_id="t", course_id="c", round_number=1)
    assert r.status == RoundStatus.PENDING
    with pytest.raises(ValidationError):
        Round(tournament_id="t", course_id="c", round_number=1, status="abandoned")


def test_leaderboard_scope_exactly_one():
    assert LeaderboardScope(tournament_id="t").is_tournament
    assert not LeaderboardScope(round_id="r").is_tournament
    with pytest.raises(ValidationError):
        LeaderboardScope()
    with pytest.raises(ValidationError):
        LeaderboardScope(tournament_id="t", round_id="r")


def test_payout_shape():
    daily = Payout(tournament_id="t", player_id="p", round_id="r",
                   amount=Decimal("40.00"), type="daily", position=1)
    assert daily.type == PayoutType.DAILY
    overall = Payout(tournament_id="t", player_id="p", amount=Decimal("120"),
                     type=PayoutType.OVERALL, position=2)
    assert overall.round_id is None
    with pytest.raises(ValidationError):
        Payout(tournament_id="t", player_id="p", amount=Decimal("-1"),
               type="daily", position=1)
