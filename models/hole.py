from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """Represents a single hole on a golf course."""
    id: Optional[str] = None
    course_id: Optional[str] = None
    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    handicap_ranking: int = Field(..., ge=1, le=18)  # 1 = hardest
    yardage: Optional[int] = Field(None, ge=0)
