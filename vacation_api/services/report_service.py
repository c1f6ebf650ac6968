from datetime import date, timedelta
from typing import Iterable

from ..core.request_rules import VacationStatus, request_days
from ..models.vacation_request import VacationRequest
from ..schemas.report import ReportOut


def days_by_month(requests: Iterable[VacationRequest], year: int) -> list[int]:
    """Approved vacation days falling in each month of `year` (index 0 = January)."""
    buckets = [0] * 12
    first, last = date(year, 1, 1), date(year, 12, 31)
    for r in requests:
        if r.status != VacationStatus.APPROVED.value:
            continue
        day = max(r.start_date, first)
        end = min(r.end_date, last)
        while day <= end:
            buckets[day.month - 1] += 1
            day += timedelta(days=1)
    return buckets


def summarize(requests: Iterable[VacationRequest], year: int) -> ReportOut:
    requests = list(requests)
    counts = {s.value: 0 for s in VacationStatus}
    for r in requests:
        counts[r.status] = counts.get(r.status, 0) + 1

    approved_days = sum(
        request_days(r.start_date, r.end_date)
        for r in requests
        if r.status == VacationStatus.APPROVED.value
    )
    months = days_by_month(requests, year)
    peak_days = max(months)
    peak_month = months.index(peak_days) + 1 if peak_days else None

    return ReportOut(
        year=year,
        total=len(requests),
        pending=counts[VacationStatus.PENDING.value],
        approved=counts[VacationStatus.APPROVED.value],
        denied=counts[VacationStatus.DENIED.value],
        requesters=len({r.user_id for r in requests}),
        approved_days=approved_days,
        days_by_month=months,
        peak_month=peak_month,
        peak_month_days=peak_days,
    )
