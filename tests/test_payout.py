from decimal import Decimal

import pytest

from app.valuation.bet_types import BET_TYPES
from app.valuation.errors import (
    IncompatibleGameModeError,
    InvalidPrizeTypeError,
    NotFoundError,
    PayoutLimitExceededError,
    UnsupportedPrizeTypeError,
)
from app.valuation.odds import get_odds
from app.valuation.payout import compute_potential_win, effective_odds, quote
from app.valuation.prizes import adjust_multiplier, covered_tiers

from conftest import make_config


def test_get_odds(config):
    assert get_odds(config, 1) == Decimal("18")
    assert get_odds(config, 2) == Decimal("4000")


@pytest.mark.parametrize("mode_id", [5, 99])
def test_inactive_or_unknown_mode_is_unavailable(config, mode_id):
    with pytest.raises(NotFoundError) as exc:
        get_odds(config, mode_id)
    assert exc.value.field == "gameModeId"
    assert exc.value.reason == "game_mode_unavailable"


@pytest.mark.parametrize("raw", ["18", "18.5", "4000", "0.01", "7", "1234.5678"])
def test_all_tiers_divides_by_five_exactly(raw):
    assert adjust_multiplier(Decimal(raw), "1-5") == Decimal(raw) / 5


@pytest.mark.parametrize("tier", ["1", "2", "3", "4", "5"])
def test_single_tier_keeps_odds(tier):
    assert adjust_multiplier(Decimal("18"), tier) == Decimal("18")


def test_all_tiers_on_non_eligible_type(monkeypatch):
    monkeypatch.setitem(BET_TYPES, "duque_grupo", BET_TYPES["duque_grupo"]._replace(multi_prize_eligible=False))
    with pytest.raises(UnsupportedPrizeTypeError):
        adjust_multiplier(Decimal("20"), "1-5", "duque_grupo")


@pytest.mark.parametrize("tier", ["1", "3", "5"])
def test_single_tier_on_all_tiers_only_type(tier):
    with pytest.raises(UnsupportedPrizeTypeError) as exc:
        adjust_multiplier(Decimal("20"), tier, "duque_grupo")
    assert exc.value.field == "premioType"


def test_multi_selection_all_tiers_divides_by_five():
    assert adjust_multiplier(Decimal("20"), "1-5", "duque_grupo") == Decimal("4")


@pytest.mark.parametrize("premio", ["0", "6", "1-4", "", "todos"])
def test_unknown_premio(premio):
    with pytest.raises(InvalidPrizeTypeError) as exc:
        adjust_multiplier(Decimal("18"), premio)
    assert exc.value.reason == "invalid_prize_type"


def test_covered_tiers():
    assert covered_tiers("3") == (3,)
    assert covered_tiers("1-5") == (1, 2, 3, 4, 5)


def test_mode_must_price_the_bet_type(config):
    assert get_odds(config, 2, "thousand") == Decimal("4000")
    with pytest.raises(IncompatibleGameModeError) as exc:
        get_odds(config, 2, "group")
    assert exc.value.field == "gameModeId"
    assert exc.value.reason == "incompatible_game_mode"
    with pytest.raises(IncompatibleGameModeError):
        quote(config, Decimal("2.00"), 2, "1", "group")


def test_group_first_prize(config):
    assert compute_potential_win(config, Decimal("2.00"), 1, "1") == Decimal("36.00")


def test_group_all_prizes(config):
    q = quote(config, Decimal("5.00"), 1, "1-5", "group")
    assert q.effective_odds == Decimal("3.6")
    assert q.potential_win == Decimal("18.00")


def test_thousand_over_ceiling_suggests_stake(config):
    with pytest.raises(PayoutLimitExceededError) as exc:
        compute_potential_win(config, Decimal("10.00"), 2, "1")
    err = exc.value
    assert err.potential_win == Decimal("40000.00")
    assert err.suggested_max_stake == Decimal("2.50")
    # the suggestion itself must be accepted
    assert compute_potential_win(config, err.suggested_max_stake, 2, "1") == Decimal("10000.00")


def test_payout_equal_to_ceiling_is_accepted():
    cfg = make_config(max_payout="36.00")
    assert compute_potential_win(cfg, Decimal("2.00"), 1, "1") == Decimal("36.00")


def test_monotonic_in_stake(config):
    last = Decimal("0")
    stake = Decimal("1.00")
    while stake <= Decimal("500.00"):
        win = compute_potential_win(config, stake, 1, "1-5", "group")
        assert win >= last
        last = win
        stake += Decimal("3.37")


@pytest.mark.parametrize("stake", ["1.11", "2.33", "7.77", "13.01", "99.99"])
@pytest.mark.parametrize("premio", ["1", "1-5"])
def test_truncation_never_exceeds_exact_product(stake, premio):
    cfg = make_config()
    stake = Decimal(stake)
    eff = effective_odds(cfg, 1, premio, "group")
    win = compute_potential_win(cfg, stake, 1, premio, "group")
    assert win <= stake * eff
    assert stake * eff - win < Decimal("0.01")
