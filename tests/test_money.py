from decimal import Decimal

import pytest

from app.core.money import floor_cents, format_brl, parse_money


@pytest.mark.parametrize("raw, expected", [
    ("1.234,56", Decimal("1234.56")),
    ("R$ 1.234,56", Decimal("1234.56")),
    ("R$\xa01.234,56", Decimal("1234.56")),
    ("1234,56", Decimal("1234.56")),
    ("12,5", Decimal("12.5")),
    ("12.50", Decimal("12.50")),
    ("1.234", Decimal("1234")),
    ("5", Decimal("5")),
    (1234.56, Decimal("1234.56")),
    (10, Decimal("10")),
    (Decimal("2.50"), Decimal("2.50")),
])
def test_parse_money(raw, expected):
    assert parse_money(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1,2,3", "12.34,5.6", "-5", "R$", None, True, float("nan")])
def test_parse_money_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_money(raw)


def test_string_and_number_normalize_to_same_value():
    assert parse_money("1.234,56") == parse_money(1234.56) == parse_money("R$ 1.234,56")


@pytest.mark.parametrize("raw, canonical", [
    ("1.234,56", "R$ 1.234,56"),
    ("R$ 1.234,56", "R$ 1.234,56"),
    ("1234,56", "R$ 1.234,56"),
    ("5", "R$ 5,00"),
    ("0,5", "R$ 0,50"),
    ("1.000.000,00", "R$ 1.000.000,00"),
])
def test_format_parse_round_trip(raw, canonical):
    assert format_brl(parse_money(raw)) == canonical
    assert format_brl(parse_money(canonical)) == canonical


def test_floor_cents_truncates():
    assert floor_cents(Decimal("4.107")) == Decimal("4.10")
    assert floor_cents(Decimal("36")) == Decimal("36.00")
    assert floor_cents(Decimal("0.019")) == Decimal("0.01")
