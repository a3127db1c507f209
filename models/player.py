from datetime import datetime
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """A golfer entered in tournaments.

    The handicap index is assigned outside the scoring engine and is only read
    here. Negative values are "plus" handicaps.
    """
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    handicap_index: float = Field(..., ge=-10, le=54)
    is_admin: bool = False
    created_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else (self.id or "Unknown player")
