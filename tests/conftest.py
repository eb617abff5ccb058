from decimal import Decimal

import pytest

from app.schemas.bets import BetIn
from app.valuation.snapshot import ValuationConfig

GAME_MODES = [
    {"id": 1, "name": "Grupo", "bet_type": "group", "odds": Decimal("18"), "active": True},
    {"id": 2, "name": "Milhar", "bet_type": "thousand", "odds": Decimal("4000"), "active": True},
    {"id": 3, "name": "Dezena", "bet_type": "dozen", "odds": Decimal("60"), "active": True},
    {"id": 4, "name": "Centena", "bet_type": "hundred", "odds": Decimal("600"), "active": True},
    {"id": 5, "name": "Duque de Grupo", "bet_type": "duque_grupo", "odds": Decimal("18.5"), "active": False},
    {"id": 6, "name": "Passe IDA", "bet_type": "passe_ida", "odds": Decimal("90"), "active": True},
    {"id": 7, "name": "Passe IDAxVOLTA", "bet_type": "passe_ida_volta", "odds": Decimal("45"), "active": True},
    {"id": 8, "name": "Duque de Dezena", "bet_type": "duque_dezena", "odds": Decimal("300"), "active": True},
]


def make_config(min_bet="1.00", max_bet="1000.00", max_payout="10000.00", default_bet="2.00"):
    return ValuationConfig.build(GAME_MODES, {
        "min_bet_amount": Decimal(min_bet),
        "max_bet_amount": Decimal(max_bet),
        "max_payout": Decimal(max_payout),
        "default_bet_amount": Decimal(default_bet),
    })


def make_bet(**kw) -> BetIn:
    data = {"gameModeId": 1, "amount": Decimal("2.00"), "type": "group", "premioType": "1", "animalId": 1, "drawId": 10}
    data.update(kw)
    return BetIn(**data)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def roomy_config():
    # payout ceiling out of the way, for stake-bound tests
    return make_config(max_payout="100000000.00")
