# app/models/system_settings.py
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Numeric, DateTime, func
from app.db.session import Base

# single row (id=1), edited from the admin panel
class SystemSettings(Base):
    __tablename__ = "system_settings"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    min_bet_amount: Mapped[float] = mapped_column(Numeric(16, 2), nullable=False)
    max_bet_amount: Mapped[float] = mapped_column(Numeric(16, 2), nullable=False)
    max_payout: Mapped[float] = mapped_column(Numeric(16, 2), nullable=False)
    default_bet_amount: Mapped[float] = mapped_column(Numeric(16, 2), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
