from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..db import get_session
from ..core.current_user import get_current_user
from ..models.user import User
from ..schemas.report import ReportOut
from ..schemas.vacation_request import (
    VacationRequestCreateIn,
    VacationRequestOut,
    VacationRequestStatusUpdateIn,
)
from ..services import report_service, request_service

router = APIRouter(prefix="/vacation-requests", tags=["vacation-requests"])

SCOPES = {
    "mine": request_service.user_requests,
    "pending": request_service.pending_requests,
    "decided": request_service.decided_requests,
}


@router.post("", response_model=VacationRequestOut, status_code=201)
def create_request(
    payload: VacationRequestCreateIn,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return request_service.create_request(session, user, payload)


@router.get("", response_model=list[VacationRequestOut])
def list_requests(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
    scope: str = Query(default="mine", pattern="^(mine|pending|decided)$"),
):
    return SCOPES[scope](session, user)


@router.get("/summary", response_model=ReportOut)
def my_summary(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
    year: int | None = Query(default=None, ge=1900, le=9999),
):
    requests = request_service.user_requests(session, user)
    return report_service.summarize(requests, year or date.today().year)


@router.get("/{request_id}", response_model=VacationRequestOut)
def get_request(
    request_id: int,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return request_service.get_request(session, user, request_id)


@router.patch("/{request_id}/status", response_model=VacationRequestOut)
def update_status(
    request_id: int,
    payload: VacationRequestStatusUpdateIn,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return request_service.update_status(session, user, request_id, payload.status, payload.comment)
