from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, BigInteger, func
from app.db.session import Base

DRAW_PENDING = "pending"
DRAW_COMPLETED = "completed"

class Draw(Base):
    __tablename__ = "draws"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)     # 'PTM 14h', 'Federal' ...
    draw_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)  # local time, betting closes here
    status: Mapped[str] = mapped_column(String(16), default=DRAW_PENDING)

    # drawn thousands, 4 chars each ("0417"), 1st..5th prize
    result1: Mapped[str | None] = mapped_column(String(4))
    result2: Mapped[str | None] = mapped_column(String(4))
    result3: Mapped[str | None] = mapped_column(String(4))
    result4: Mapped[str | None] = mapped_column(String(4))
    result5: Mapped[str | None] = mapped_column(String(4))

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    def results(self) -> list[str | None]:
        return [self.result1, self.result2, self.result3, self.result4, self.result5]
