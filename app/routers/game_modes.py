from typing import List

from fastapi import APIRouter, Depends

from app.schemas.game_modes import GameModeOut, SystemSettingsOut
from app.services.config_service import get_valuation_config
from app.valuation.snapshot import ValuationConfig

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/game-modes", response_model=List[GameModeOut])
async def list_game_modes(config: ValuationConfig = Depends(get_valuation_config)):
    return sorted(config.game_modes.values(), key=lambda m: m.id)


@router.get("/system-settings", response_model=SystemSettingsOut)
async def get_system_settings(config: ValuationConfig = Depends(get_valuation_config)):
    return SystemSettingsOut.model_validate(config.settings)
