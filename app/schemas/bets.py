from decimal import Decimal
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Request body shared by /api/bets/quote and /api/bets (field names follow the web client)
class BetIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    draw_id: Optional[int] = Field(None, alias="drawId")
    game_mode_id: int = Field(alias="gameModeId")
    amount: Union[Decimal, str]                    # 12.5 / "12,50" / "R$ 1.234,56"
    bet_type: str = Field(alias="type")            # group / dozen / thousand ...
    premio_type: str = Field("1", alias="premioType")

    animal_id: Optional[int] = Field(None, alias="animalId")
    animal_id2: Optional[int] = Field(None, alias="animalId2")
    animal_id3: Optional[int] = Field(None, alias="animalId3")
    animal_id4: Optional[int] = Field(None, alias="animalId4")
    animal_id5: Optional[int] = Field(None, alias="animalId5")

    bet_numbers: Optional[List[str]] = Field(None, alias="betNumbers")
    linked_draw_id: Optional[int] = Field(None, alias="linkedDrawId")

    # client side figure, advisory only
    potential_win_amount: Optional[Union[Decimal, str]] = Field(None, alias="potentialWinAmount")

    def animal_slots(self) -> List[Optional[int]]:
        return [self.animal_id, self.animal_id2, self.animal_id3, self.animal_id4, self.animal_id5]


class ValuationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    accepted: bool
    stage: str
    last_stage: Optional[str] = Field(None, alias="lastStage")  # last step passed before a rejection
    stake: Optional[Decimal] = None
    effective_odds: Optional[Decimal] = Field(None, alias="effectiveOdds")
    potential_win: Optional[Decimal] = Field(None, alias="potentialWin")
    rejection_reason: Optional[str] = Field(None, alias="rejectionReason")
    field: Optional[str] = None
    detail: Optional[str] = None
    suggested_max_stake: Optional[Decimal] = Field(None, alias="suggestedMaxStake")
    min_bet_amount: Optional[Decimal] = Field(None, alias="minBetAmount")
    max_bet_amount: Optional[Decimal] = Field(None, alias="maxBetAmount")


class BetOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    draw_id: int = Field(alias="drawId")
    game_mode_id: int = Field(alias="gameModeId")
    bet_type: str = Field(alias="type")
    premio_type: str = Field(alias="premioType")
    amount: Decimal
    odds: Decimal
    potential_win_amount: Decimal = Field(alias="potentialWinAmount")
    status: str
    balance: Optional[Decimal] = None
