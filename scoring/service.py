"""Score submission and leaderboard orchestration.

The service is the only layer that turns per-score validation results into a
batch-level outcome: a batch is accepted whole or rejected whole.
"""

import logging
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from models import (
    Course,
    Hole,
    HoleScore,
    LeaderboardEntry,
    LeaderboardScope,
    Player,
    ScoreSubmission,
)
from scoring.exceptions import MissingReferenceError, ScoreValidationError
from scoring.handicap import (
    course_handicap,
    format_score_to_par,
    max_legal_score,
    net_strokes,
    score_to_par,
    stroke_allocation,
)
from scoring.leaderboard import rank
from scoring.store import ScoringStore
from scoring.validator import validate_score

logger = logging.getLogger(__name__)


class SubmissionResult(BaseModel):
    """Outcome of a batch submission: either every score persisted or none."""
    accepted: bool
    scores: List[HoleScore] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    def raise_for_errors(self) -> None:
        if not self.accepted:
            raise ScoreValidationError(self.errors)


class HandicapSummary(BaseModel):
    """A player's course handicap and stroke allocation on one course."""
    player_id: str
    course_id: str
    handicap_index: float
    course_handicap: int
    strokes_by_hole: Dict[int, int]
    max_score_by_hole: Dict[int, int]


class _LookupCache:
    """Per-call memo so a batch hits storage once per player, hole, and course."""

    def __init__(self, store: ScoringStore):
        self._store = store
        self._players: Dict[str, Player] = {}
        self._holes: Dict[str, Hole] = {}
        self._courses: Dict[str, Course] = {}

    async def player(self, player_id: str) -> Player:
        if player_id not in self._players:
            player = await self._store.get_player(player_id)
            if player is None:
                raise MissingReferenceError("player", player_id)
            self._players[player_id] = player
        return self._players[player_id]

    async def hole(self, hole_id: str) -> Hole:
        if hole_id not in self._holes:
            hole = await self._store.get_hole(hole_id)
            if hole is None:
                raise MissingReferenceError("hole", hole_id)
            self._holes[hole_id] = hole
        return self._holes[hole_id]

    async def course(self, course_id: Optional[str]) -> Course:
        if course_id is None:
            raise MissingReferenceError("course", "None")
        if course_id not in self._courses:
            course = await self._store.get_course(course_id)
            if course is None:
                raise MissingReferenceError("course", course_id)
            self._courses[course_id] = course
        return self._courses[course_id]


class ScoringService:
    """Validates and persists scores, and builds leaderboards on demand."""

    def __init__(self, store: ScoringStore):
        self._store = store

    async def submit_scores(self, batch: Sequence[ScoreSubmission]) -> SubmissionResult:
        """Validate every score in the batch, then persist all of them or none.

        Raises MissingReferenceError if any score points at an unknown player,
        hole, or course.
        """
        lookups = _LookupCache(self._store)
        errors: List[str] = []
        pending: List[HoleScore] = []

        for submission in batch:
            try:
                player = await lookups.player(submission.player_id)
                hole = await lookups.hole(submission.hole_id)
                course = await lookups.course(hole.course_id)
            except MissingReferenceError as e:
                logger.warning(
                    "Score for scorecard %s references missing data: %s",
                    submission.scorecard_id, e,
                )
                raise

            handicap = course_handicap(
                player.handicap_index,
                course.slope_rating,
                course.course_rating,
                course.par,
            )
            result = validate_score(submission.strokes, hole, handicap)
            if not result.valid:
                errors.append(
                    f"Hole {hole.number} for {player.display_name}: {result.message}"
                )
                continue

            pending.append(
                HoleScore(
                    scorecard_id=submission.scorecard_id,
                    player_id=submission.player_id,
                    hole_id=submission.hole_id,
                    hole_number=hole.number,
                    strokes=submission.strokes,
                    net_strokes=net_strokes(submission.strokes, result.strokes_received),
                )
            )

        if errors:
            logger.info("Rejected score batch of %d: %d invalid", len(batch), len(errors))
            return SubmissionResult(accepted=False, errors=errors)

        if not pending:
            return SubmissionResult(accepted=True)

        saved = await self._store.upsert_hole_scores(pending)
        logger.debug("Saved %d hole scores", len(saved))
        return SubmissionResult(accepted=True, scores=saved)

    async def get_leaderboard(self, scope: LeaderboardScope) -> List[LeaderboardEntry]:
        """Rank players in a tournament or round by total net strokes.

        Players without any scored hole in scope are left off; an empty scope
        gives an empty list.
        """
        totals = await self._store.sum_net_strokes_by_player(scope)
        by_player = {t.player_id: t for t in totals if t.holes_played > 0}

        entries: List[LeaderboardEntry] = []
        for ranked in rank(by_player.values()):
            total = by_player[ranked.player_id]
            to_par = score_to_par(total.total_net_strokes, total.par_played)
            entries.append(
                LeaderboardEntry(
                    player_id=total.player_id,
                    display_name=total.display_name or total.player_id,
                    position=ranked.position,
                    total_net_strokes=total.total_net_strokes,
                    total_strokes=total.total_strokes,
                    holes_played=total.holes_played,
                    net_to_par=to_par,
                    net_to_par_display=format_score_to_par(to_par),
                    handicap_index=total.handicap_index,
                    rounds_played=total.rounds_played if scope.is_tournament else None,
                )
            )
        return entries

    async def handicap_summary(self, player_id: str, course_id: str) -> HandicapSummary:
        """Course handicap and per-hole strokes/max scores for score-entry screens."""
        lookups = _LookupCache(self._store)
        player = await lookups.player(player_id)
        course = await lookups.course(course_id)

        handicap = course_handicap(
            player.handicap_index,
            course.slope_rating,
            course.course_rating,
            course.par,
        )
        strokes = stroke_allocation(handicap, course.holes)
        max_scores = {
            hole.number: max_legal_score(hole.par, strokes[hole.number])
            for hole in course.holes
        }
        return HandicapSummary(
            player_id=player_id,
            course_id=course_id,
            handicap_index=player.handicap_index,
            course_handicap=handicap,
            strokes_by_hole=strokes,
            max_score_by_hole=max_scores,
        )
