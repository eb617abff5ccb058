# app/valuation/bet_types.py
from typing import Dict, NamedTuple, Optional

from app.valuation.errors import InvalidBetTypeError

ANIMAL_GROUPS = 25   # animals are the fixed groups 1..25


class BetTypeContract(NamedTuple):
    label: str
    animal_slots: int                  # 0..5
    numeric_count: int                 # how many numeric selections
    numeric_digits: Optional[int]      # None | 2 | 3 | 4
    multi_prize_eligible: bool         # may target "1-5"
    single_tier: bool = True           # may target one prize "1".."5"
    requires_linked_draw: bool = False


# Multi-selection types (duque, terno, quadra, quina, passe) need their picks
# spread over several prizes, so they are only sold on 1st..5th.
BET_TYPES: Dict[str, BetTypeContract] = {
    "group":           BetTypeContract("Grupo", 1, 0, None, True),
    "duque_grupo":     BetTypeContract("Duque de Grupo", 2, 0, None, True, False),
    "terno_grupo":     BetTypeContract("Terno de Grupo", 3, 0, None, True, False),
    "quadra_duque":    BetTypeContract("Quadra de Duque", 4, 0, None, True, False),
    "quina_grupo":     BetTypeContract("Quina de Grupo", 5, 0, None, True, False),
    "dozen":           BetTypeContract("Dezena", 0, 1, 2, True),
    "duque_dezena":    BetTypeContract("Duque de Dezena", 0, 2, 2, True, False),
    "terno_dezena":    BetTypeContract("Terno de Dezena", 0, 3, 2, True, False),
    "hundred":         BetTypeContract("Centena", 0, 1, 3, True),
    "thousand":        BetTypeContract("Milhar", 0, 1, 4, True),
    "passe_ida":       BetTypeContract("Passe IDA", 2, 0, None, True, False),
    "passe_ida_volta": BetTypeContract("Passe IDAxVOLTA", 2, 0, None, True, False, True),
}


def classify(bet_type: str) -> BetTypeContract:
    contract = BET_TYPES.get(bet_type)
    if contract is None:
        raise InvalidBetTypeError(f"Tipo de aposta desconhecido: {bet_type}", field="type")
    return contract
