# app/valuation/errors.py
from __future__ import annotations
from decimal import Decimal
from typing import Optional


class ValuationError(Exception):
    """
    Base for every rejection the engine can produce.
      reason: machine readable code returned to the UI
      field:  offending input, so the form can highlight it
    """
    reason = "valuation_error"

    def __init__(self, detail: str, field: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.field = field


class InvalidBetTypeError(ValuationError):
    reason = "invalid_bet_type"


class NotFoundError(ValuationError):
    # unknown or deactivated game mode
    reason = "game_mode_unavailable"


class InvalidPrizeTypeError(ValuationError):
    # premioType outside "1".."5" and "1-5"
    reason = "invalid_prize_type"


class UnsupportedPrizeTypeError(ValuationError):
    # valid premioType the bet type is not sold on
    reason = "unsupported_prize_type"


class IncompatibleGameModeError(ValuationError):
    reason = "incompatible_game_mode"


class StructuralValidationError(ValuationError):
    reason = "structural_validation"


class InvalidStakeError(ValuationError):
    reason = "invalid_stake"


class StakeOutOfRangeError(ValuationError):
    reason = "stake_out_of_range"

    def __init__(self, detail: str, minimum: Decimal, maximum: Decimal, field: str = "amount"):
        super().__init__(detail, field)
        self.minimum = minimum
        self.maximum = maximum


class PayoutLimitExceededError(ValuationError):
    reason = "payout_limit_exceeded"

    def __init__(self, detail: str, potential_win: Decimal, max_payout: Decimal,
                 suggested_max_stake: Decimal, field: str = "amount"):
        super().__init__(detail, field)
        self.potential_win = potential_win
        self.max_payout = max_payout
        self.suggested_max_stake = suggested_max_stake


class PotentialWinMismatchError(ValuationError):
    # client figure differs from the server recomputation
    reason = "potential_win_mismatch"
