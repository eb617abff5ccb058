import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db.session import engine, Base
from app.models.game_mode import GameMode
from app.models.system_settings import SystemSettings
from app.services.config_service import SETTINGS_ROW_ID

# register every table on Base.metadata before create_all
import app.models.bet  # noqa: F401
import app.models.draw  # noqa: F401
import app.models.transaction  # noqa: F401
import app.models.user  # noqa: F401

logger = logging.getLogger(__name__)

# (name, description, bet type, odds)
DEFAULT_GAME_MODES = [
    ("Milhar", "Jogo na milhar (4 números)", "thousand", "8000"),
    ("Centena", "Jogo na centena (3 números)", "hundred", "800"),
    ("Grupo", "Jogo no grupo", "group", "21"),
    ("Dezena", "Jogo na dezena (2 números)", "dozen", "84"),
    ("Duque de Grupo", "Jogo em 2 grupos", "duque_grupo", "20"),
    ("Duque de Dezena", "Jogo em 2 dezenas", "duque_dezena", "300"),
    ("Quadra de Duque", "Jogo em 4 grupos em dupla", "quadra_duque", "1000"),
    ("Terno de Grupo", "Jogo em 3 grupos", "terno_grupo", "150"),
    ("Terno de Dezena", "Jogo em 3 dezenas", "terno_dezena", "6000"),
    ("Quina de Grupo", "Jogo em 5 grupos", "quina_grupo", "5000"),
    ("Passe IDA", "Passe simples", "passe_ida", "90"),
    ("Passe IDAxVOLTA", "Passe duplo", "passe_ida_volta", "45"),
]

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def ensure_system_settings(session: AsyncSession) -> SystemSettings:
    row = await session.get(SystemSettings, SETTINGS_ROW_ID)
    if row is None:
        row = SystemSettings(
            id=SETTINGS_ROW_ID,
            min_bet_amount=Decimal(settings.DEFAULT_MIN_BET_AMOUNT),
            max_bet_amount=Decimal(settings.DEFAULT_MAX_BET_AMOUNT),
            max_payout=Decimal(settings.DEFAULT_MAX_PAYOUT),
            default_bet_amount=Decimal(settings.DEFAULT_BET_AMOUNT),
        )
        session.add(row)
        await session.commit()
        logger.info("system_settings row created with defaults")
    return row

async def ensure_default_game_modes(session: AsyncSession) -> int:
    """Insert the standard modalities on an empty table; never touches existing rows."""
    existing = (await session.execute(select(GameMode.id).limit(1))).first()
    if existing:
        return 0
    for name, desc, bet_type, odds in DEFAULT_GAME_MODES:
        session.add(GameMode(name=name, description=desc, bet_type=bet_type, odds=Decimal(odds), active=True))
    await session.commit()
    logger.info("seeded %d game modes", len(DEFAULT_GAME_MODES))
    return len(DEFAULT_GAME_MODES)
