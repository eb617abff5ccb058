
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Numeric, DateTime, BigInteger, func
from app.db.session import Base

TX_BET = "bet"
TX_WIN = "win"

class Transaction(Base):
    __tablename__ = "transactions"
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False)   # bet debit | win credit
    amount: Mapped[float] = mapped_column(Numeric(16,2), nullable=False)
    balance_after: Mapped[float] = mapped_column(Numeric(16,2), nullable=False)
    bet_id: Mapped[int | None] = mapped_column(BigInteger)
    description: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
