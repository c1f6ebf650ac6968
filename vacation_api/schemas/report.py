from pydantic import BaseModel, Field


class ReportOut(BaseModel):
    year: int
    total: int
    pending: int
    approved: int
    denied: int
    requesters: int
    approved_days: int
    days_by_month: list[int] = Field(default_factory=list)
    peak_month: int | None = None
    peak_month_days: int = 0
