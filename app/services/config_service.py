from decimal import Decimal

from fastapi import Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.models.game_mode import GameMode
from app.models.system_settings import SystemSettings
from app.valuation.snapshot import GameModeInfo, SystemSettingsInfo, ValuationConfig

SETTINGS_ROW_ID = 1


def _dec(v) -> Decimal:
    return Decimal(str(v))


async def load_system_settings(session: AsyncSession) -> SystemSettingsInfo | None:
    row = await session.get(SystemSettings, SETTINGS_ROW_ID)
    if row is None:
        return None
    return SystemSettingsInfo(
        min_bet_amount=_dec(row.min_bet_amount),
        max_bet_amount=_dec(row.max_bet_amount),
        max_payout=_dec(row.max_payout),
        default_bet_amount=_dec(row.default_bet_amount),
    )


async def load_game_modes(session: AsyncSession) -> list[GameModeInfo]:
    rows = (await session.execute(select(GameMode).order_by(GameMode.id.asc()))).scalars().all()
    return [
        GameModeInfo(id=m.id, name=m.name, description=m.description, bet_type=m.bet_type,
                     odds=_dec(m.odds), active=bool(m.active))
        for m in rows
    ]


async def load_valuation_config(session: AsyncSession) -> ValuationConfig:
    """Fresh snapshot per call: admin edits to odds/limits apply to the next bet."""
    sys_settings = await load_system_settings(session)
    if sys_settings is None:
        raise HTTPException(503, "Configurações do sistema indisponíveis")
    return ValuationConfig.build(await load_game_modes(session), sys_settings)


async def get_valuation_config(session: AsyncSession = Depends(get_session)) -> ValuationConfig:
    return await load_valuation_config(session)
