# app/tasks/settlement.py
from __future__ import annotations
import datetime as dt
import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.money import q2
from app.db.session import AsyncSessionLocal
from app.models.bet import Bet, BET_PENDING, BET_WON, BET_LOST
from app.models.draw import Draw, DRAW_COMPLETED
from app.models.transaction import Transaction, TX_WIN
from app.models.user import User
from app.valuation.bet_types import classify
from app.valuation.prizes import covered_tiers

logger = logging.getLogger(__name__)

BATCH_LIMIT = 200      # bets per sweep, keeps transactions short

GROUP_TYPES = ("group", "duque_grupo", "terno_grupo", "quadra_duque", "quina_grupo")
NUMBER_TYPES = ("dozen", "hundred", "thousand", "duque_dezena", "terno_dezena")


# ------------------------------
# Draw results
# ------------------------------
def group_of(number: str) -> int:
    """Animal group of a drawn number: last two digits, 01-04 -> 1 ... 97-99,00 -> 25."""
    dd = int(number[-2:])
    if dd == 0:
        return 25
    return (dd + 3) // 4


def _complete_results(results: Sequence[Optional[str]]) -> Optional[List[str]]:
    out = [str(r) for r in results if r]
    if len(out) != 5 or not all(len(r) == 4 and r.isdigit() for r in out):
        return None
    return out


# ------------------------------
# Hit rules
# ------------------------------
def is_winner(bet_type: str, premio_type: str, animals: Iterable[Optional[int]],
              numbers: Optional[Iterable[str]], results: Sequence[str]) -> bool:
    """
    results: the five drawn thousands, 1st prize first.
    Group bets need every chosen group among the covered prizes, number bets
    compare the last 2/3/4 digits. Passe: first animal on the 1st prize and
    the second one on 2nd..5th (either order for ida x volta).
    """
    contract = classify(bet_type)
    chosen = [a for a in animals if a is not None][:contract.animal_slots]
    picks = list(numbers or [])
    drawn = [results[t - 1] for t in covered_tiers(premio_type)]

    if bet_type in GROUP_TYPES:
        groups = {group_of(r) for r in drawn}
        return bool(chosen) and set(chosen) <= groups

    if bet_type in NUMBER_TYPES:
        width = contract.numeric_digits
        tails = {r[-width:] for r in drawn}
        return bool(picks) and set(picks) <= tails

    if bet_type in ("passe_ida", "passe_ida_volta"):
        if len(chosen) != 2:
            return False
        head = group_of(results[0])
        rest = {group_of(r) for r in results[1:]}
        a, b = chosen
        if head == a and b in rest:
            return True
        return bet_type == "passe_ida_volta" and head == b and a in rest

    return False


# ------------------------------
# Settle one bet (own transaction)
# ------------------------------
async def _settle_one_bet(session: AsyncSession, bet_id: int, results: Sequence[str]) -> Optional[dict]:
    bet = await session.get(Bet, bet_id, with_for_update=True)
    if not bet or bet.status != BET_PENDING:
        return None

    won = is_winner(bet.bet_type, bet.premio_type or "1", bet.animal_slots(), bet.bet_numbers, results)
    bet.settled_at = dt.datetime.utcnow()

    if not won:
        bet.status = BET_LOST
        bet.win_amount = Decimal("0.00")
        await session.flush()
        return {"bet_id": bet.id, "user_id": bet.user_id, "win": Decimal("0.00")}

    # paid at the price fixed when the bet was placed ("1-5" already divided)
    prize = q2(Decimal(str(bet.potential_win_amount)))
    bet.status = BET_WON
    bet.win_amount = prize

    user = await session.get(User, bet.user_id, with_for_update=True)
    if user is None:
        logger.error("bet %s won but user %s is missing", bet.id, bet.user_id)
        await session.flush()
        return {"bet_id": bet.id, "user_id": None, "win": prize}

    balance_after = q2(Decimal(str(user.balance or 0)) + prize)
    user.balance = balance_after
    session.add(Transaction(
        user_id=user.id,
        type=TX_WIN,
        amount=prize,
        balance_after=balance_after,
        bet_id=bet.id,
        description=f"Prêmio da aposta #{bet.id}",
    ))
    await session.flush()
    return {"bet_id": bet.id, "user_id": user.id, "win": prize}


# ------------------------------
# Sweep: completed draws x pending bets
# ------------------------------
async def settle_bets_once() -> int:
    """Returns how many bets were settled this round."""
    async with AsyncSessionLocal() as session:
        rs = await session.execute(
            select(Bet.id, Bet.draw_id)
            .join(Draw, Draw.id == Bet.draw_id)
            .where(Bet.status == BET_PENDING, Draw.status == DRAW_COMPLETED)
            .order_by(Bet.id.asc())
            .limit(BATCH_LIMIT)
        )
        rows = rs.all()
        if not rows:
            return 0

        results: Dict[int, Optional[List[str]]] = {}
        for _, draw_id in rows:
            if draw_id not in results:
                draw = await session.get(Draw, draw_id)
                results[draw_id] = _complete_results(draw.results()) if draw else None

    settled = 0
    for bet_id, draw_id in rows:
        res = results.get(draw_id)
        if res is None:
            logger.error("draw %s is completed but has incomplete results", draw_id)
            continue
        try:
            async with AsyncSessionLocal() as s:
                async with s.begin():
                    details = await _settle_one_bet(s, bet_id, res)
            if details:
                settled += 1
                if details["win"] > 0:
                    logger.info("bet %s won %s (user %s)", details["bet_id"], details["win"], details["user_id"])
        except Exception as e:
            logger.exception("settlement failed bet_id=%s: %s", bet_id, e)
            continue
    return settled


async def settle_bets_job():
    try:
        await settle_bets_once()
    except Exception as e:
        logger.exception("settle_bets_job failed: %s", e)
