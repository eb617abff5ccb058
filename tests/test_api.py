from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.auth import get_current_user
from app.db.session import get_session
from app.main import app
from app.models.user import User
from app.services.bet_service import check_client_potential_win
from app.services.config_service import get_valuation_config
from app.valuation.errors import PotentialWinMismatchError

from conftest import make_config


async def _no_session():
    yield None


@pytest.fixture
def client():
    cfg = make_config()
    app.dependency_overrides[get_valuation_config] = lambda: cfg
    app.dependency_overrides[get_session] = _no_session
    app.dependency_overrides[get_current_user] = lambda: User(id=7, username="maria", status=1, balance=100)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_game_modes(client):
    resp = client.get("/api/game-modes")
    assert resp.status_code == 200
    names = [m["name"] for m in resp.json()]
    assert names[:2] == ["Grupo", "Milhar"]
    inactive = [m for m in resp.json() if not m["active"]]
    assert [m["id"] for m in inactive] == [5]


def test_system_settings(client):
    resp = client.get("/api/system-settings")
    assert resp.status_code == 200
    body = resp.json()
    assert Decimal(body["maxPayout"]) == Decimal("10000.00")
    assert Decimal(body["minBetAmount"]) == Decimal("1.00")


def test_quote_accepted(client):
    resp = client.post("/api/bets/quote", json={
        "gameModeId": 1, "amount": "R$ 2,00", "type": "group", "premioType": "1", "animalId": 1,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is True
    assert Decimal(body["potentialWin"]) == Decimal("36.00")


def test_quote_rejection_is_not_an_http_error(client):
    resp = client.post("/api/bets/quote", json={
        "gameModeId": 2, "amount": 10, "type": "thousand", "betNumbers": ["1234"],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is False
    assert body["rejectionReason"] == "payout_limit_exceeded"
    assert Decimal(body["suggestedMaxStake"]) == Decimal("2.50")


def test_quote_rejects_mode_of_another_bet_type(client):
    resp = client.post("/api/bets/quote", json={
        "gameModeId": 2, "amount": 2, "type": "group", "animalId": 1,
    })
    body = resp.json()
    assert body["accepted"] is False
    assert body["rejectionReason"] == "incompatible_game_mode"
    assert body["field"] == "gameModeId"
    assert body["potentialWin"] is None


def test_quote_numbers_must_be_strings(client):
    resp = client.post("/api/bets/quote", json={
        "gameModeId": 2, "amount": 1, "type": "thousand", "betNumbers": [12],
    })
    assert resp.status_code == 422


def test_place_rejects_invalid_bet(client):
    resp = client.post("/api/bets", json={
        "drawId": 1, "gameModeId": 1, "amount": 2, "type": "duque_grupo", "animalId": 1,
    })
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["rejectionReason"] == "structural_validation"
    assert detail["field"] == "animalId2"


def test_place_rejects_client_figure_mismatch(client):
    resp = client.post("/api/bets", json={
        "drawId": 1, "gameModeId": 1, "amount": 2, "type": "group", "animalId": 1,
        "potentialWinAmount": 40,
    })
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["rejectionReason"] == "potential_win_mismatch"
    assert detail["field"] == "potentialWinAmount"


def test_check_client_potential_win():
    check_client_potential_win(None, Decimal("36.00"))
    check_client_potential_win("36,00", Decimal("36.00"))
    check_client_potential_win(36, Decimal("36.00"))
    with pytest.raises(PotentialWinMismatchError):
        check_client_potential_win("36,01", Decimal("36.00"))
    with pytest.raises(PotentialWinMismatchError):
        check_client_potential_win("lots", Decimal("36.00"))


def test_ping(client):
    assert client.get("/ping").json()["ok"] is True
