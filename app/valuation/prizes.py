# app/valuation/prizes.py
from decimal import Decimal
from typing import Optional, Tuple

from app.valuation.bet_types import classify
from app.valuation.errors import InvalidPrizeTypeError, UnsupportedPrizeTypeError

SINGLE_TIERS = ("1", "2", "3", "4", "5")
ALL_TIERS = "1-5"
PREMIO_TYPES = SINGLE_TIERS + (ALL_TIERS,)

TIER_COUNT = Decimal(len(SINGLE_TIERS))


def check_premio_type(premio_type: str, bet_type: Optional[str] = None) -> None:
    if premio_type not in PREMIO_TYPES:
        raise InvalidPrizeTypeError(f"Prêmio inválido: {premio_type}", field="premioType")
    if bet_type is None:
        return
    contract = classify(bet_type)
    if premio_type == ALL_TIERS and not contract.multi_prize_eligible:
        raise UnsupportedPrizeTypeError(
            f"{contract.label} não permite apostar do 1º ao 5º prêmio",
            field="premioType",
        )
    if premio_type != ALL_TIERS and not contract.single_tier:
        raise UnsupportedPrizeTypeError(
            f"{contract.label} só pode ser jogado do 1º ao 5º prêmio",
            field="premioType",
        )


def adjust_multiplier(raw_odds: Decimal, premio_type: str, bet_type: Optional[str] = None) -> Decimal:
    """
    Effective multiplier for the prize target.
      "1".."5" -> raw_odds
      "1-5"    -> raw_odds / 5 (the stake covers five tiers at once)
    """
    check_premio_type(premio_type, bet_type)
    if premio_type == ALL_TIERS:
        return Decimal(raw_odds) / TIER_COUNT
    return Decimal(raw_odds)


def covered_tiers(premio_type: str) -> Tuple[int, ...]:
    """Prize positions (1-based) a bet competes on when the draw is settled."""
    if premio_type == ALL_TIERS:
        return (1, 2, 3, 4, 5)
    return (int(premio_type),)
