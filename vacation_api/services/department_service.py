from datetime import datetime, timezone
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import NotFound
from ..models.department import Department

logger = logging.getLogger(__name__)


def list_departments(session: Session) -> list[Department]:
    return list(session.scalars(select(Department).order_by(Department.id.asc())).all())


def get_department(session: Session, department_id: int) -> Department:
    dept = session.get(Department, department_id)
    if not dept:
        raise NotFound("Department not found")
    return dept


def add_department(session: Session, name: str) -> Department:
    dept = Department(name=name.strip(), created_at=datetime.now(timezone.utc))
    session.add(dept)
    session.commit()
    session.refresh(dept)
    logger.info("department added (id=%s, name=%s)", dept.id, dept.name)
    return dept


def update_department(session: Session, department_id: int, name: str) -> Department:
    dept = get_department(session, department_id)
    dept.name = name.strip()
    session.commit()
    session.refresh(dept)
    logger.info("department renamed (id=%s, name=%s)", dept.id, dept.name)
    return dept


def remove_department(session: Session, department_id: int) -> None:
    # Users and requests keep the department name they were saved with.
    dept = get_department(session, department_id)
    session.delete(dept)
    session.commit()
    logger.info("department removed (id=%s)", department_id)
