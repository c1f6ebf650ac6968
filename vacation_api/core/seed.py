from datetime import date, datetime, timezone
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.department import Department
from ..models.user import User
from ..models.vacation_request import VacationRequest
from .security import hash_password

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

USER_SEEDS = [
    dict(name="John Employee", war_name="John", rank="Cabo", email="employee@example.com",
         role="employee", department="Engineering", supervisor="supervisor@example.com"),
    dict(name="Jane Supervisor", war_name="Jane", rank="Tenente", email="supervisor@example.com",
         role="supervisor", department="Engineering", supervisor=None),
    dict(name="Alice Admin", war_name="Alice", rank="Capitão", email="admin@example.com",
         role="admin", department="Administration", supervisor=None),
    dict(name="Bob Employee", war_name="Bob", rank="Soldado", email="bob@example.com",
         role="employee", department="Marketing", supervisor="supervisor@example.com"),
    dict(name="Charlie Employee", war_name="Charlie", rank="Sargento", email="charlie@example.com",
         role="employee", department="Finance", supervisor="supervisor@example.com"),
]

DEPARTMENT_SEEDS = ["Seção de Informática", "Seção de Pessoal"]

REQUEST_SEEDS = [
    dict(email="employee@example.com", start_date=date(2025, 5, 1), end_date=date(2025, 5, 10),
         reason="Annual family vacation", status="pending",
         created_at="2025-04-01T10:30:00", updated_at="2025-04-01T10:30:00", comment=None),
    dict(email="bob@example.com", start_date=date(2025, 6, 15), end_date=date(2025, 6, 20),
         reason="Wedding attendance", status="approved",
         created_at="2025-04-10T14:20:00", updated_at="2025-04-12T09:15:00",
         comment="Approved. Enjoy the wedding!"),
    dict(email="charlie@example.com", start_date=date(2025, 4, 25), end_date=date(2025, 5, 5),
         reason="Medical leave", status="denied",
         created_at="2025-04-15T11:45:00", updated_at="2025-04-16T16:30:00",
         comment="Please provide medical documentation before approval."),
    dict(email="employee@example.com", start_date=date(2025, 7, 1), end_date=date(2025, 7, 15),
         reason="Summer holiday", status="approved",
         created_at="2025-04-20T09:00:00", updated_at="2025-04-21T14:10:00",
         comment="Approved as requested."),
]


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _is_empty(session: Session, model) -> bool:
    return not session.scalar(select(func.count()).select_from(model))


def seed_users(session: Session) -> None:
    """
    Demo users, only when the users table is empty.
    Every account uses DEMO_PASSWORD.
    """
    if not _is_empty(session, User):
        return

    password_hash = hash_password(DEMO_PASSWORD)
    by_email: dict[str, User] = {}
    for s in USER_SEEDS:
        u = User(
            name=s["name"],
            war_name=s["war_name"],
            rank=s["rank"],
            email=s["email"],
            password_hash=password_hash,
            role=s["role"],
            department=s["department"],
        )
        session.add(u)
        by_email[s["email"]] = u
    session.flush()

    for s in USER_SEEDS:
        if s["supervisor"]:
            by_email[s["email"]].supervisor_id = by_email[s["supervisor"]].id
    session.commit()
    logger.info("seeded %s users", len(USER_SEEDS))


def seed_departments(session: Session) -> None:
    if not _is_empty(session, Department):
        return
    now = datetime.now(timezone.utc)
    for name in DEPARTMENT_SEEDS:
        session.add(Department(name=name, created_at=now))
    session.commit()
    logger.info("seeded %s departments", len(DEPARTMENT_SEEDS))


def seed_vacation_requests(session: Session) -> None:
    if not _is_empty(session, VacationRequest):
        return
    emails = {s["email"] for s in REQUEST_SEEDS}
    users = {u.email: u for u in session.scalars(select(User).where(User.email.in_(emails))).all()}

    added = 0
    for s in REQUEST_SEEDS:
        requester = users.get(s["email"])
        if not requester:
            continue
        supervisor = session.get(User, requester.supervisor_id) if requester.supervisor_id else None
        session.add(
            VacationRequest(
                user_id=requester.id,
                user_name=requester.name,
                user_war_name=requester.war_name,
                user_rank=requester.rank,
                user_department=requester.department,
                start_date=s["start_date"],
                end_date=s["end_date"],
                reason=s["reason"],
                status=s["status"],
                created_at=_utc(s["created_at"]),
                updated_at=_utc(s["updated_at"]),
                supervisor_id=supervisor.id if supervisor else None,
                supervisor_name=supervisor.name if supervisor else None,
                supervisor_comment=s["comment"],
            )
        )
        added += 1
    session.commit()
    logger.info("seeded %s vacation requests", added)


def seed_demo_data(session: Session) -> None:
    seed_users(session)
    seed_departments(session)
    seed_vacation_requests(session)
