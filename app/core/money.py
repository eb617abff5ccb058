# app/core/money.py
"""
Money helpers shared by the valuation engine, the routers and settlement.

Amounts are always Decimal. Stakes reach us either as JSON numbers or as the
pt-BR strings the betting form produces ("R$ 1.234,56"), and both must land
on the same Decimal value:

    format_brl(parse_money("1.234,56")) == "R$ 1.234,56"
    format_brl(parse_money(1234.56))    == "R$ 1.234,56"
"""
from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP

CENT = Decimal("0.01")

_BR_COMMA = re.compile(r"(\d{1,3}(\.\d{3})+|\d+),\d+")
_BR_THOUSANDS = re.compile(r"\d{1,3}(\.\d{3})+")
_PLAIN = re.compile(r"\d+(\.\d+)?")


def q2(v) -> Decimal:
    return Decimal(v).quantize(CENT, rounding=ROUND_HALF_UP)


def q4(v) -> Decimal:
    return Decimal(v).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)


def floor_cents(v: Decimal) -> Decimal:
    """Truncate towards -inf to whole cents; never rounds a payout up."""
    return Decimal(v).quantize(CENT, rounding=ROUND_FLOOR)


def to_decimal(v) -> Decimal:
    # floats go through str() so 0.1 stays 0.1
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def parse_money(value) -> Decimal:
    """
    Normalize a stake to Decimal. Raises ValueError on anything that is not a
    plain amount.

    Accepted strings: "12", "12.50", "12,50", "1.234,56", "R$ 1.234,56",
    "1.234" (dots without a comma are thousands separators when grouped by 3).
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"invalid amount: {value!r}")

    if isinstance(value, (int, float, Decimal)):
        try:
            d = to_decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"invalid amount: {value!r}") from e
        if not d.is_finite():
            raise ValueError(f"invalid amount: {value!r}")
        return d

    if not isinstance(value, str):
        raise ValueError(f"invalid amount: {value!r}")

    s = value.replace("R$", "").replace("\xa0", "").replace(" ", "").strip()
    if not s:
        raise ValueError("empty amount")

    if "," in s:
        if not _BR_COMMA.fullmatch(s):
            raise ValueError(f"invalid amount: {value!r}")
        s = s.replace(".", "").replace(",", ".")
    elif _BR_THOUSANDS.fullmatch(s):
        s = s.replace(".", "")
    elif not _PLAIN.fullmatch(s):
        raise ValueError(f"invalid amount: {value!r}")

    return Decimal(s)


def format_brl(v) -> str:
    d = q2(to_decimal(v))
    sign = "-" if d < 0 else ""
    units, cents = f"{abs(d):.2f}".split(".")
    units = f"{int(units):,}".replace(",", ".")
    return f"{sign}R$ {units},{cents}"
