from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_session
from ..core.current_user import require_admin
from ..models.user import User
from ..schemas.department import DepartmentCreateIn, DepartmentOut, DepartmentUpdateIn
from ..services import department_service

router = APIRouter(prefix="/departments", tags=["departments"])


# Public: the registration form needs the department list.
@router.get("", response_model=list[DepartmentOut])
def list_departments(session: Session = Depends(get_session)):
    return department_service.list_departments(session)


@router.post("", response_model=DepartmentOut, status_code=201)
def create_department(
    payload: DepartmentCreateIn,
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
):
    return department_service.add_department(session, payload.name)


@router.patch("/{department_id}", response_model=DepartmentOut)
def update_department(
    department_id: int,
    payload: DepartmentUpdateIn,
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
):
    return department_service.update_department(session, department_id, payload.name)


@router.delete("/{department_id}", status_code=204)
def delete_department(
    department_id: int,
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
):
    department_service.remove_department(session, department_id)
