from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class GameModeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    bet_type: str
    odds: Decimal
    active: bool

class SystemSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    min_bet_amount: Decimal = Field(alias="minBetAmount")
    max_bet_amount: Decimal = Field(alias="maxBetAmount")
    max_payout: Decimal = Field(alias="maxPayout")
    default_bet_amount: Decimal = Field(alias="defaultBetAmount")
