import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import select, func, case

from ..db import get_session
from ..models.user import User
from ..models.vacation_request import VacationRequest
from ..core.current_user import require_admin
from ..schemas.admin_user import AdminUserOut, AdminUserUpdateIn


router = APIRouter(prefix="/admin/users", tags=["admin-users"])

logger = logging.getLogger(__name__)

ALLOWED_ROLES = {"employee", "supervisor", "admin"}


def user_stats_stmt():
    pending_case = case((VacationRequest.status == "pending", 1), else_=0)
    return (
        select(
            User.id,
            User.name,
            User.war_name,
            User.rank,
            User.email,
            User.department,
            User.role,
            User.supervisor_id,
            func.coalesce(func.sum(pending_case), 0).label("pending"),
            func.count(VacationRequest.id).label("total"),
        )
        .outerjoin(VacationRequest, VacationRequest.user_id == User.id)
        .group_by(
            User.id,
            User.name,
            User.war_name,
            User.rank,
            User.email,
            User.department,
            User.role,
            User.supervisor_id,
        )
    )


@router.get("", response_model=list[AdminUserOut])
def list_users(
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
):
    rows = session.execute(user_stats_stmt().order_by(User.id.asc())).mappings().all()
    return [AdminUserOut(**row) for row in rows]


@router.patch("/{user_id}", response_model=AdminUserOut)
def update_user(
    user_id: int,
    payload: AdminUserUpdateIn,
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    target = session.get(User, user_id)
    if not target:
        raise HTTPException(status_code=404, detail="User not found")

    if payload.role is not None:
        if payload.role not in ALLOWED_ROLES:
            raise HTTPException(status_code=422, detail="Invalid role")
        target.role = payload.role

    if "supervisor_id" in payload.model_fields_set:
        if payload.supervisor_id is not None:
            if payload.supervisor_id == target.id:
                raise HTTPException(status_code=422, detail="A user cannot supervise themself")
            if not session.get(User, payload.supervisor_id):
                raise HTTPException(status_code=404, detail="Supervisor not found")
        target.supervisor_id = payload.supervisor_id

    session.commit()
    logger.info(
        "user updated by admin (user_id=%s, role=%s, supervisor_id=%s, admin_id=%s)",
        target.id,
        target.role,
        target.supervisor_id,
        admin.id,
    )

    row = session.execute(user_stats_stmt().where(User.id == user_id)).mappings().first()
    return AdminUserOut(**row)
