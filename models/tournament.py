from datetime import date
from decimal import Decimal
from enum import Enum
from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class Tournament(BaseGolfModel):
    """A multi-round event with daily and overall buy-ins."""
    id: Optional[str] = None
    name: str
    start_date: date
    end_date: date
    daily_buy_in: Decimal = Field(Decimal("0"), ge=0)
    overall_buy_in: Decimal = Field(Decimal("0"), ge=0)
    is_active: bool = True

    @model_validator(mode='after')
    def validate_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("Tournament end_date is before start_date")
        return self


class PayoutType(str, Enum):
    DAILY = "daily"
    OVERALL = "overall"


class Payout(BaseGolfModel):
    """Prize money record. Amounts are decided outside the scoring engine."""
    id: Optional[str] = None
    tournament_id: str
    player_id: str
    round_id: Optional[str] = None  # None for the overall tournament payout
    amount: Decimal = Field(..., ge=0)
    type: PayoutType
    position: int = Field(..., ge=1)
