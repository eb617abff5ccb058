# app/valuation/payout.py
from __future__ import annotations
from decimal import Decimal
from typing import NamedTuple, Optional

from app.core.money import floor_cents, format_brl, to_decimal
from app.valuation.errors import PayoutLimitExceededError
from app.valuation.odds import get_odds
from app.valuation.prizes import adjust_multiplier
from app.valuation.snapshot import ValuationConfig


class Quote(NamedTuple):
    raw_odds: Decimal
    effective_odds: Decimal
    potential_win: Decimal


def effective_odds(config: ValuationConfig, game_mode_id: int, premio_type: str,
                   bet_type: Optional[str] = None) -> Decimal:
    return adjust_multiplier(get_odds(config, game_mode_id, bet_type), premio_type, bet_type)


def quote(config: ValuationConfig, stake, game_mode_id: int, premio_type: str,
          bet_type: Optional[str] = None) -> Quote:
    """
    Price a stake against the current odds:
      1. odds of the game mode (which must price bet_type, when given)
      2. prize-target adjustment ("1-5" divides by 5)
      3. truncate stake * odds to cents
      4. enforce max_payout
    """
    stake = to_decimal(stake)
    raw = get_odds(config, game_mode_id, bet_type)
    eff = adjust_multiplier(raw, premio_type, bet_type)
    win = floor_cents(stake * eff)

    max_payout = config.settings.max_payout
    if win > max_payout:
        suggested = floor_cents(max_payout / eff)
        raise PayoutLimitExceededError(
            f"O prêmio máximo permitido é de {format_brl(max_payout)}. "
            f"Reduza sua aposta para no máximo {format_brl(suggested)}",
            potential_win=win,
            max_payout=max_payout,
            suggested_max_stake=suggested,
        )
    return Quote(raw, eff, win)


def compute_potential_win(config: ValuationConfig, stake, game_mode_id: int, premio_type: str,
                          bet_type: Optional[str] = None) -> Decimal:
    return quote(config, stake, game_mode_id, premio_type, bet_type).potential_win
