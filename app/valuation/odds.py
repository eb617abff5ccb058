# app/valuation/odds.py
from decimal import Decimal
from typing import Optional

from app.valuation.bet_types import classify
from app.valuation.errors import IncompatibleGameModeError, NotFoundError
from app.valuation.snapshot import ValuationConfig

UNAVAILABLE_MSG = "Modalidade indisponível, escolha outra modalidade"


def _check_mode_fits(config: ValuationConfig, mode, bet_type: str) -> None:
    if mode.bet_type == bet_type:
        return
    label = classify(bet_type).label
    detail = f'Tipo de aposta "{label}" é incompatível com a modalidade "{mode.name}".'
    fits = [m.name for m in config.game_modes.values() if m.active and m.bet_type == bet_type]
    if fits:
        detail += f' Use a modalidade "{fits[0]}".'
    raise IncompatibleGameModeError(detail, field="gameModeId")


def get_odds(config: ValuationConfig, game_mode_id: int, bet_type: Optional[str] = None) -> Decimal:
    """
    Current multiplier of an active game mode; inactive modes are not offered for new bets.
    With bet_type, the mode must also be the one that prices that bet type.
    """
    mode = config.game_modes.get(game_mode_id)
    if mode is None or not mode.active or mode.odds <= 0:
        raise NotFoundError(UNAVAILABLE_MSG, field="gameModeId")
    if bet_type is not None:
        _check_mode_fits(config, mode, bet_type)
    return mode.odds
