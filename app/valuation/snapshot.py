# app/valuation/snapshot.py
from __future__ import annotations
from decimal import Decimal
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict


class GameModeInfo(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    bet_type: str          # the one bet type this mode prices
    odds: Decimal
    active: bool = True


class SystemSettingsInfo(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    min_bet_amount: Decimal
    max_bet_amount: Decimal
    max_payout: Decimal
    default_bet_amount: Decimal


class ValuationConfig(BaseModel):
    """Read-only view of game modes + system settings taken at request time."""
    model_config = ConfigDict(frozen=True)

    game_modes: Dict[int, GameModeInfo]
    settings: SystemSettingsInfo

    @classmethod
    def build(cls, modes: Iterable, settings) -> "ValuationConfig":
        # accepts ORM rows or plain dicts
        infos = [
            m if isinstance(m, GameModeInfo) else GameModeInfo.model_validate(m)
            for m in modes
        ]
        if not isinstance(settings, SystemSettingsInfo):
            settings = SystemSettingsInfo.model_validate(settings)
        return cls(game_modes={m.id: m for m in infos}, settings=settings)
