# app/models/game_mode.py
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Numeric, Boolean, DateTime, func
from app.db.session import Base

class GameMode(Base):
    __tablename__ = "game_modes"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)   # 'Grupo' | 'Milhar' ...
    description: Mapped[str | None] = mapped_column(String(255))
    bet_type: Mapped[str] = mapped_column(String(32), nullable=False)             # bet type priced by this mode
    odds: Mapped[float] = mapped_column(Numeric(12, 4), nullable=False)           # multiplier, 18 = 18x
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
