import pytest

from models import Course, Hole, Player


class InMemoryStore:
    """ScoringStore stand-in that records every call."""

    def __init__(self, players=(), courses=(), totals=()):
        self.players = {p.id: p for p in players}
        self.courses = {c.id: c for c in courses}
        self.holes = {h.id: h for c in courses for h in c.holes}
        self.totals = list(totals)
        self.saved = {}
        self.upsert_calls = 0
        self.lookups = {"player": 0, "hole": 0, "course": 0}
        self.last_scope = None

    async def get_player(self, player_id):
        self.lookups["player"] += 1
        return self.players.get(player_id)

    async def get_hole(self, hole_id):
        self.lookups["hole"] += 1
        return self.holes.get(hole_id)

    async def get_course(self, course_id):
        self.lookups["course"] += 1
        return self.courses.get(course_id)

    async def upsert_hole_scores(self, scores):
        self.upsert_calls += 1
        for score in scores:
            self.saved[score.key] = score
        return list(scores)

    async def sum_net_strokes_by_player(self, scope):
        self.last_scope = scope
        return self.totals


def build_course(course_id="c1"):
    # Hole n has par 4 and handicap ranking n
    holes = [
        Hole(id=f"h{n}", course_id=course_id, number=n, par=4, handicap_ranking=n)
        for n in range(1, 19)
    ]
    return Course(id=course_id, name="Pine Valley", par=72, slope_rating=128,
                  course_rating=71.2, holes=holes)


def build_player(player_id="p1"):
    # Course handicap on build_course(): round(12.5 * 128 / 113 - 0.8) = 13
    return Player(id=player_id, first_name="Ann", last_name="Lee", handicap_index=12.5)


@pytest.fixture
def make_store():
    return InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore(players=[build_player()], courses=[build_course()])
