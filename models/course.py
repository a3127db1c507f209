from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole


class Course(BaseGolfModel):
    """Golf course with its ratings and holes.

    Slope and course rating are required together: a course without them can
    never be used to compute a course handicap.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    par: int = Field(..., ge=54, le=80)
    slope_rating: int = Field(..., ge=55, le=155)
    course_rating: float = Field(..., ge=55.0, le=85.0)
    yardage: Optional[int] = Field(None, ge=0)
    holes: List[Hole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_hole_layout(self):
        """Hole numbers and handicap rankings must each be unique within the course."""
        numbers = [h.number for h in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Duplicate hole number on course")
        rankings = [h.handicap_ranking for h in self.holes]
        if len(rankings) != len(set(rankings)):
            raise ValueError("Duplicate handicap ranking on course")
        return self
