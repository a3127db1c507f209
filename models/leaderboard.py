from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class LeaderboardScope(BaseGolfModel):
    """Either a whole tournament or a single round, never both."""
    tournament_id: Optional[str] = None
    round_id: Optional[str] = None

    @model_validator(mode='after')
    def validate_exactly_one(self):
        if (self.tournament_id is None) == (self.round_id is None):
            raise ValueError("Leaderboard scope needs exactly one of tournament_id or round_id")
        return self

    @property
    def is_tournament(self) -> bool:
        return self.tournament_id is not None


class PlayerTotal(BaseGolfModel):
    """Per-player aggregate of persisted hole scores within a scope."""
    player_id: str
    display_name: Optional[str] = None
    handicap_index: Optional[float] = None
    total_net_strokes: int = 0
    total_strokes: int = 0
    par_played: int = 0
    holes_played: int = Field(0, ge=0)
    rounds_played: int = Field(0, ge=0)


class RankedEntry(BaseGolfModel):
    player_id: str
    total_net_strokes: int
    position: int = Field(..., ge=1)


class LeaderboardEntry(BaseGolfModel):
    """A leaderboard row. Computed per request, never persisted."""
    player_id: str
    display_name: str
    position: int
    total_net_strokes: int
    total_strokes: int
    holes_played: int
    net_to_par: int
    net_to_par_display: str
    handicap_index: Optional[float] = None
    rounds_played: Optional[int] = None  # tournament scope only
