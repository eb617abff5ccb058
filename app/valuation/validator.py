# app/valuation/validator.py
"""
Bet gatekeeper.

A submission moves through

    Received -> StructurallyValidated -> StakeValidated -> PayoutValidated -> Accepted

and is rejected at the first failing step. validate_and_price() never raises
ValuationError: every failure comes back as a rejection with a reason code,
the offending field and, for payout overflows, the largest acceptable stake.
The function only reads the config snapshot, so the same input always gives
the same answer.
"""
from __future__ import annotations
import logging
import re
from decimal import Decimal, InvalidOperation

from app.core.money import CENT, format_brl, parse_money
from app.schemas.bets import BetIn, ValuationOut
from app.valuation.bet_types import ANIMAL_GROUPS, BetTypeContract, classify
from app.valuation.errors import (
    InvalidStakeError,
    PayoutLimitExceededError,
    StakeOutOfRangeError,
    StructuralValidationError,
    ValuationError,
)
from app.valuation.payout import quote
from app.valuation.prizes import check_premio_type
from app.valuation.snapshot import ValuationConfig

logger = logging.getLogger(__name__)

RECEIVED = "Received"
STRUCTURALLY_VALIDATED = "StructurallyValidated"
STAKE_VALIDATED = "StakeValidated"
PAYOUT_VALIDATED = "PayoutValidated"
ACCEPTED = "Accepted"
REJECTED = "Rejected"

ANIMAL_FIELDS = ("animalId", "animalId2", "animalId3", "animalId4", "animalId5")


def _check_animals(bet: BetIn, contract: BetTypeContract) -> None:
    slots = bet.animal_slots()
    for i, (field, animal) in enumerate(zip(ANIMAL_FIELDS, slots)):
        if i < contract.animal_slots:
            if animal is None:
                raise StructuralValidationError(
                    f"{contract.label} exige {contract.animal_slots} animal(is)", field=field)
            if not 1 <= animal <= ANIMAL_GROUPS:
                raise StructuralValidationError(f"Animal inválido: {animal}", field=field)
        elif animal is not None:
            raise StructuralValidationError(
                f"{contract.label} aceita no máximo {contract.animal_slots} animal(is)", field=field)

    chosen = slots[:contract.animal_slots]
    if len(set(chosen)) != len(chosen):
        raise StructuralValidationError("Animais repetidos na mesma aposta", field=ANIMAL_FIELDS[0])


def _check_numbers(bet: BetIn, contract: BetTypeContract) -> None:
    numbers = bet.bet_numbers or []
    if len(numbers) != contract.numeric_count:
        raise StructuralValidationError(
            f"{contract.label} exige {contract.numeric_count} número(s)", field="betNumbers")
    if not numbers:
        return

    pattern = re.compile(r"[0-9]{%d}" % contract.numeric_digits)
    for n in numbers:
        # "0012" and "12" are different bets, never pad or strip
        if not isinstance(n, str) or not pattern.fullmatch(n):
            raise StructuralValidationError(
                f"{contract.label} exige números de {contract.numeric_digits} dígitos: {n!r}",
                field="betNumbers")
    if len(set(numbers)) != len(numbers):
        raise StructuralValidationError("Números repetidos na mesma aposta", field="betNumbers")


def validate_structure(bet: BetIn) -> BetTypeContract:
    contract = classify(bet.bet_type)
    _check_animals(bet, contract)
    _check_numbers(bet, contract)
    check_premio_type(bet.premio_type, bet.bet_type)
    if contract.requires_linked_draw:
        if bet.linked_draw_id is None:
            raise StructuralValidationError(
                f"{contract.label} exige o sorteio de volta", field="linkedDrawId")
        if bet.draw_id is not None and bet.linked_draw_id == bet.draw_id:
            raise StructuralValidationError(
                "O sorteio de volta deve ser diferente do sorteio de ida", field="linkedDrawId")
    return contract


def validate_stake(amount, config: ValuationConfig) -> Decimal:
    try:
        stake = parse_money(amount)
    except ValueError as e:
        raise InvalidStakeError(f"Valor de aposta inválido: {amount!r}", field="amount") from e

    try:
        whole_cents = stake == stake.quantize(CENT)
    except InvalidOperation:
        whole_cents = False
    if stake <= 0 or not whole_cents:
        raise InvalidStakeError(f"Valor de aposta inválido: {amount!r}", field="amount")

    lo = config.settings.min_bet_amount
    hi = config.settings.max_bet_amount
    if stake < lo:
        raise StakeOutOfRangeError(
            f"O valor mínimo de aposta é {format_brl(lo)}", minimum=lo, maximum=hi)
    if stake > hi:
        raise StakeOutOfRangeError(
            f"A aposta máxima permitida é de {format_brl(hi)}", minimum=lo, maximum=hi)
    return stake


def _rejection(err: ValuationError, last_stage: str, stake=None) -> ValuationOut:
    out = ValuationOut(
        accepted=False,
        stage=REJECTED,
        last_stage=last_stage,
        stake=stake,
        rejection_reason=err.reason,
        field=err.field,
        detail=err.detail,
    )
    if isinstance(err, StakeOutOfRangeError):
        out.min_bet_amount = err.minimum
        out.max_bet_amount = err.maximum
    if isinstance(err, PayoutLimitExceededError):
        out.potential_win = err.potential_win
        out.suggested_max_stake = err.suggested_max_stake
    return out


def validate_and_price(bet: BetIn, config: ValuationConfig) -> ValuationOut:
    stage = RECEIVED
    stake = None
    try:
        validate_structure(bet)
        stage = STRUCTURALLY_VALIDATED

        stake = validate_stake(bet.amount, config)
        stage = STAKE_VALIDATED

        q = quote(config, stake, bet.game_mode_id, bet.premio_type, bet.bet_type)
        stage = PAYOUT_VALIDATED
    except ValuationError as e:
        logger.info("bet rejected at %s: %s (%s) %s", stage, e.reason, e.field, e.detail)
        return _rejection(e, stage, stake)

    return ValuationOut(
        accepted=True,
        stage=ACCEPTED,
        stake=stake,
        effective_odds=q.effective_odds,
        potential_win=q.potential_win,
    )
