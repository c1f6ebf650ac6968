"""Vacation request ledger: creation, status decisions and role-scoped views."""
from datetime import datetime, timezone
import logging

from sqlalchemy import Select, desc, select
from sqlalchemy.orm import Session

from ..core.errors import InvalidTransition, NotFound, PermissionDenied
from ..core.request_rules import VacationStatus, check_transition
from ..models.user import User
from ..models.vacation_request import VacationRequest
from ..schemas.vacation_request import VacationRequestCreateIn

logger = logging.getLogger(__name__)

REVIEWER_ROLES = {"supervisor", "admin"}


def is_reviewer(user: User) -> bool:
    return user.role in REVIEWER_ROLES


def _ordered(stmt: Select) -> Select:
    return stmt.order_by(desc(VacationRequest.created_at), desc(VacationRequest.id))


def user_requests_stmt(user: User) -> Select:
    """Requests a user may see: their own (employee), their team's (supervisor), or all (admin)."""
    stmt = select(VacationRequest)
    if user.role == "admin":
        return stmt
    if user.role == "supervisor":
        return stmt.where(VacationRequest.supervisor_id == user.id)
    return stmt.where(VacationRequest.user_id == user.id)


def user_requests(session: Session, user: User) -> list[VacationRequest]:
    return list(session.scalars(_ordered(user_requests_stmt(user))).all())


def _review_stmt(user: User, statuses: list[str]) -> Select:
    stmt = select(VacationRequest).where(VacationRequest.status.in_(statuses))
    if user.role != "admin":
        stmt = stmt.where(VacationRequest.supervisor_id == user.id)
    return stmt


def pending_requests(session: Session, user: User) -> list[VacationRequest]:
    if not is_reviewer(user):
        return []
    stmt = _review_stmt(user, [VacationStatus.PENDING.value])
    return list(session.scalars(_ordered(stmt)).all())


def decided_requests(session: Session, user: User) -> list[VacationRequest]:
    if not is_reviewer(user):
        return []
    stmt = _review_stmt(user, [VacationStatus.APPROVED.value, VacationStatus.DENIED.value])
    return list(session.scalars(_ordered(stmt)).all())


def can_view(user: User, req: VacationRequest) -> bool:
    if user.role == "admin":
        return True
    if user.role == "supervisor" and req.supervisor_id == user.id:
        return True
    return req.user_id == user.id


def get_request(session: Session, user: User, request_id: int) -> VacationRequest:
    req = session.get(VacationRequest, request_id)
    if not req:
        raise NotFound("Vacation request not found")
    if not can_view(user, req):
        raise PermissionDenied("Forbidden")
    return req


def create_request(session: Session, user: User, payload: VacationRequestCreateIn) -> VacationRequest:
    supervisor = session.get(User, user.supervisor_id) if user.supervisor_id else None
    now = datetime.now(timezone.utc)
    req = VacationRequest(
        user_id=user.id,
        user_name=user.name,
        user_war_name=user.war_name,
        user_rank=user.rank,
        user_department=user.department,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
        status=VacationStatus.PENDING.value,
        created_at=now,
        updated_at=now,
        supervisor_id=supervisor.id if supervisor else None,
        supervisor_name=supervisor.name if supervisor else None,
    )
    session.add(req)
    session.commit()
    session.refresh(req)
    logger.info(
        "vacation request created (id=%s, user_id=%s, %s..%s)",
        req.id,
        user.id,
        req.start_date,
        req.end_date,
    )
    return req


def update_status(
    session: Session,
    actor: User,
    request_id: int,
    status: VacationStatus,
    comment: str | None = None,
) -> VacationRequest:
    if not is_reviewer(actor):
        raise PermissionDenied("Only supervisors and admins can decide requests")

    req = session.get(VacationRequest, request_id)
    if not req:
        logger.warning("status update on unknown request (id=%s, actor_id=%s)", request_id, actor.id)
        raise NotFound("Vacation request not found")
    if actor.role != "admin" and req.supervisor_id != actor.id:
        raise PermissionDenied("Forbidden")

    old = req.status
    new = VacationStatus(status).value
    try:
        changed = check_transition(old, new)
    except InvalidTransition:
        logger.warning("rejected status change (id=%s, %s -> %s)", req.id, old, new)
        raise
    note = comment.strip() if comment else ""
    # Repeating the recorded decision only writes when it brings a new comment.
    if not changed and (not note or note == req.supervisor_comment):
        return req

    req.status = new
    if note:
        req.supervisor_comment = note
    req.updated_at = datetime.now(timezone.utc)
    session.commit()
    session.refresh(req)
    logger.info("vacation request %s (id=%s, actor_id=%s)", new, req.id, actor.id)
    return req
