import pytest

from app.valuation.bet_types import BET_TYPES, classify
from app.valuation.errors import InvalidBetTypeError


@pytest.mark.parametrize("tag, animals, count, digits", [
    ("group", 1, 0, None),
    ("duque_grupo", 2, 0, None),
    ("terno_grupo", 3, 0, None),
    ("quadra_duque", 4, 0, None),
    ("quina_grupo", 5, 0, None),
    ("dozen", 0, 1, 2),
    ("duque_dezena", 0, 2, 2),
    ("terno_dezena", 0, 3, 2),
    ("hundred", 0, 1, 3),
    ("thousand", 0, 1, 4),
    ("passe_ida", 2, 0, None),
    ("passe_ida_volta", 2, 0, None),
])
def test_contracts(tag, animals, count, digits):
    c = classify(tag)
    assert (c.animal_slots, c.numeric_count, c.numeric_digits) == (animals, count, digits)


def test_only_passe_volta_needs_linked_draw():
    assert [t for t, c in BET_TYPES.items() if c.requires_linked_draw] == ["passe_ida_volta"]


def test_prize_targets():
    assert all(c.multi_prize_eligible for c in BET_TYPES.values())
    single = {t for t, c in BET_TYPES.items() if c.single_tier}
    assert single == {"group", "dozen", "hundred", "thousand"}


@pytest.mark.parametrize("tag", ["", "GROUP", "milhar", "quina"])
def test_unknown_tag(tag):
    with pytest.raises(InvalidBetTypeError) as exc:
        classify(tag)
    assert exc.value.reason == "invalid_bet_type"
    assert exc.value.field == "type"
