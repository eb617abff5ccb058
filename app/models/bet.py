
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Numeric, DateTime, BigInteger, JSON, UniqueConstraint, func
from app.db.session import Base

BET_PENDING = "pending"
BET_WON = "won"
BET_LOST = "lost"

class Bet(Base):
    __tablename__ = "bets"
    __table_args__ = (
        UniqueConstraint("user_id", "idempotency_key", name="uq_bets_user_idempotency"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    draw_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    linked_draw_id: Mapped[int | None] = mapped_column(BigInteger)   # passe ida x volta
    game_mode_id: Mapped[int] = mapped_column(Integer, nullable=False)

    bet_type: Mapped[str] = mapped_column(String(32), nullable=False)
    premio_type: Mapped[str] = mapped_column(String(8), default="1")
    animal_id: Mapped[int | None] = mapped_column(Integer)
    animal_id2: Mapped[int | None] = mapped_column(Integer)
    animal_id3: Mapped[int | None] = mapped_column(Integer)
    animal_id4: Mapped[int | None] = mapped_column(Integer)
    animal_id5: Mapped[int | None] = mapped_column(Integer)
    bet_numbers: Mapped[list | None] = mapped_column(JSON)

    amount: Mapped[float] = mapped_column(Numeric(16,2), nullable=False)
    odds: Mapped[float] = mapped_column(Numeric(12,4), nullable=False)          # effective odds at placement
    potential_win_amount: Mapped[float] = mapped_column(Numeric(16,2), nullable=False)
    status: Mapped[str] = mapped_column(String(16), default=BET_PENDING)
    win_amount: Mapped[float] = mapped_column(Numeric(16,2), default=0)
    settled_at: Mapped[datetime | None] = mapped_column(DateTime)

    ip: Mapped[str | None] = mapped_column(String(64))
    idempotency_key: Mapped[str | None] = mapped_column(String(64))   # per user, see __table_args__
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    def animal_slots(self) -> list[int | None]:
        return [self.animal_id, self.animal_id2, self.animal_id3, self.animal_id4, self.animal_id5]
