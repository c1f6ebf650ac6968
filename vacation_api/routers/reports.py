from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_session
from ..core.current_user import require_admin
from ..models.user import User
from ..models.vacation_request import VacationRequest
from ..schemas.report import ReportOut
from ..services.report_service import summarize

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=ReportOut)
def system_summary(
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
    year: int | None = Query(default=None, ge=1900, le=9999),
):
    requests = session.scalars(select(VacationRequest)).all()
    return summarize(requests, year or date.today().year)
