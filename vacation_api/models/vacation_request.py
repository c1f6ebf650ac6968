from datetime import date, datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Date, DateTime, Integer, ForeignKey
from .user import Base
from ..core.request_rules import VacationStatus, request_days

class VacationRequest(Base):
    __tablename__ = "vacation_requests"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)

    # Requester snapshot at submission time; later profile changes do not touch it.
    user_name: Mapped[str] = mapped_column(String(100))
    user_war_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    user_rank: Mapped[str | None] = mapped_column(String(50), nullable=True)
    user_department: Mapped[str | None] = mapped_column(String(120), nullable=True)

    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    reason: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[str] = mapped_column(String(16), default=VacationStatus.PENDING.value)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    supervisor_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    supervisor_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    supervisor_comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def days(self) -> int:
        return request_days(self.start_date, self.end_date)
