from datetime import date, datetime
from pydantic import BaseModel, Field, model_validator

from ..core.request_rules import VacationStatus


class VacationRequestCreateIn(BaseModel):
    start_date: date
    end_date: date
    reason: str = Field(default="", max_length=2000)

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be earlier than start_date")
        return self


class VacationRequestStatusUpdateIn(BaseModel):
    status: VacationStatus
    comment: str | None = Field(default=None, max_length=2000)


class VacationRequestOut(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_war_name: str | None = None
    user_rank: str | None = None
    user_department: str | None = None
    start_date: date
    end_date: date
    days: int
    reason: str
    status: VacationStatus
    created_at: datetime
    updated_at: datetime
    supervisor_id: int | None = None
    supervisor_name: str | None = None
    supervisor_comment: str | None = None

    class Config:
        from_attributes = True
