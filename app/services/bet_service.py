
import logging
from decimal import Decimal

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.money import format_brl, parse_money, q2
from app.core.timeutil import now_br, to_naive
from app.models.bet import Bet, BET_PENDING
from app.models.draw import Draw, DRAW_PENDING
from app.models.transaction import Transaction, TX_BET
from app.models.user import User
from app.schemas.bets import BetIn, ValuationOut
from app.valuation.errors import PotentialWinMismatchError

logger = logging.getLogger(__name__)


def check_client_potential_win(client_value, server_value: Decimal) -> None:
    """The client figure is advisory: it must match the server price to the cent or the bet is refused."""
    if client_value is None:
        return
    try:
        claimed = q2(parse_money(client_value))
    except ValueError as e:
        raise PotentialWinMismatchError("Valor de prêmio informado inválido",
                                        field="potentialWinAmount") from e
    if claimed != server_value:
        raise PotentialWinMismatchError(
            f"Prêmio informado ({format_brl(claimed)}) difere do calculado ({format_brl(server_value)})",
            field="potentialWinAmount",
        )


async def ensure_draw_open(session: AsyncSession, draw_id: int | None, field: str = "drawId") -> Draw:
    if draw_id is None:
        raise HTTPException(400, {"field": field, "detail": "Sorteio não informado"})
    draw = await session.get(Draw, draw_id)
    if not draw:
        raise HTTPException(400, {"field": field, "detail": "Sorteio não encontrado"})
    if draw.status != DRAW_PENDING or to_naive(now_br()) >= draw.draw_time:
        raise HTTPException(400, {"field": field, "detail": "Sorteio encerrado para apostas"})
    return draw


async def place_bet(
        session: AsyncSession,
        user_id: int,
        bet: BetIn,
        priced: ValuationOut,
        ip: str | None = None,
        idempotency_key: str | None = None,
) -> tuple[Bet, Decimal]:
    """
    Persist an already priced bet: debit balance, write Bet + ledger row.
    Caller owns the transaction (commit/rollback).
    """
    if idempotency_key:
        existed = await session.scalar(
            select(Bet).where(Bet.user_id == user_id, Bet.idempotency_key == idempotency_key)
        )
        if existed:
            u = await session.get(User, user_id)
            return existed, Decimal(str(u.balance or 0))

    await ensure_draw_open(session, bet.draw_id)
    if bet.linked_draw_id is not None:
        await ensure_draw_open(session, bet.linked_draw_id, field="linkedDrawId")

    stake = priced.stake
    u = await session.get(User, user_id, with_for_update=True)
    bal = Decimal(str(u.balance or 0))
    if bal < stake:
        raise HTTPException(400, {"field": "amount", "detail": "Saldo insuficiente"})
    balance_after = q2(bal - stake)
    u.balance = balance_after

    row = Bet(
        user_id=user_id,
        draw_id=bet.draw_id,
        linked_draw_id=bet.linked_draw_id,
        game_mode_id=bet.game_mode_id,
        bet_type=bet.bet_type,
        premio_type=bet.premio_type,
        animal_id=bet.animal_id,
        animal_id2=bet.animal_id2,
        animal_id3=bet.animal_id3,
        animal_id4=bet.animal_id4,
        animal_id5=bet.animal_id5,
        bet_numbers=bet.bet_numbers,
        amount=stake,
        odds=priced.effective_odds,
        potential_win_amount=priced.potential_win,
        status=BET_PENDING,
        ip=ip,
        idempotency_key=idempotency_key,
    )
    session.add(row)
    await session.flush()  # row.id

    session.add(Transaction(
        user_id=user_id,
        type=TX_BET,
        amount=stake,
        balance_after=balance_after,
        bet_id=row.id,
        description=f"Aposta #{row.id}",
    ))
    logger.info("bet %s placed: user=%s type=%s stake=%s win=%s",
                row.id, user_id, bet.bet_type, stake, priced.potential_win)
    return row, balance_after
