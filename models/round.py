from datetime import date as date_type
from enum import Enum
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel


class RoundStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Round(BaseGolfModel):
    """One day of a tournament, played on a single course."""
    id: Optional[str] = None
    tournament_id: str
    course_id: str
    round_number: int = Field(..., ge=1)
    date: Optional[date_type] = None
    status: RoundStatus = RoundStatus.PENDING


class Scorecard(BaseGolfModel):
    """A named group (A, B, C...) of players whose scores are entered together."""
    id: Optional[str] = None
    round_id: str
    name: str
    player_ids: List[str] = Field(default_factory=list)
