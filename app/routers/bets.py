from __future__ import annotations
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.core.auth import get_current_user
from app.models.bet import Bet
from app.models.user import User
from app.schemas.bets import BetIn, BetOut, ValuationOut
from app.services.bet_service import check_client_potential_win, place_bet
from app.services.config_service import get_valuation_config
from app.valuation.errors import ValuationError
from app.valuation.snapshot import ValuationConfig
from app.valuation.validator import PAYOUT_VALIDATED, REJECTED, validate_and_price


router = APIRouter(prefix="/api/bets", tags=["bets"])

MAX_HISTORY = 100


def get_client_ip(req: Request) -> str:
    xff = req.headers.get("X-Forwarded-For") or req.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    return req.client.host if req.client else ""


def _reject(result: ValuationOut) -> HTTPException:
    return HTTPException(400, result.model_dump(mode="json", by_alias=True))


def _bet_out(row: Bet, balance: Optional[Decimal] = None) -> BetOut:
    return BetOut(
        id=row.id,
        draw_id=row.draw_id,
        game_mode_id=row.game_mode_id,
        bet_type=row.bet_type,
        premio_type=row.premio_type,
        amount=Decimal(str(row.amount)),
        odds=Decimal(str(row.odds)),
        potential_win_amount=Decimal(str(row.potential_win_amount)),
        status=row.status,
        balance=balance,
    )


@router.post("/quote", response_model=ValuationOut)
async def quote_bet(payload: BetIn, config: ValuationConfig = Depends(get_valuation_config)):
    """Price a bet without placing it; rejections come back with accepted=false, not as errors."""
    return validate_and_price(payload, config)


@router.post("", response_model=BetOut, status_code=201)
async def create_bet(
        payload: BetIn,
        request: Request,
        idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
        session: AsyncSession = Depends(get_session),
        config: ValuationConfig = Depends(get_valuation_config),
        current_user: User = Depends(get_current_user),
):
    """
    Place a bet:
      - price is recomputed here (client potentialWinAmount is not trusted)
      - debit user balance, write Bet + ledger in one transaction
    """
    result = validate_and_price(payload, config)
    if not result.accepted:
        raise _reject(result)

    try:
        check_client_potential_win(payload.potential_win_amount, result.potential_win)
    except ValuationError as e:
        result = ValuationOut(
            accepted=False,
            stage=REJECTED,
            last_stage=PAYOUT_VALIDATED,
            stake=result.stake,
            potential_win=result.potential_win,
            rejection_reason=e.reason,
            field=e.field,
            detail=e.detail,
        )
        raise _reject(result) from e

    try:
        row, balance = await place_bet(
            session, current_user.id, payload, result,
            ip=get_client_ip(request), idempotency_key=idempotency_key,
        )
        await session.commit()
        return _bet_out(row, balance)

    except HTTPException:
        await session.rollback(); raise
    except Exception:
        await session.rollback(); raise


@router.get("", response_model=List[BetOut])
async def bet_history(
        limit: int = 20,
        session: AsyncSession = Depends(get_session),
        current_user: User = Depends(get_current_user),
):
    rs = await session.execute(
        select(Bet).where(Bet.user_id == current_user.id)
        .order_by(Bet.id.desc()).limit(max(1, min(limit, MAX_HISTORY)))
    )
    return [_bet_out(b) for b in rs.scalars().all()]
