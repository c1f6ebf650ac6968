from datetime import datetime, timezone
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..core.errors import DuplicateEmail, InvalidCredentials
from ..core.security import create_access_token, hash_password, verify_password
from ..models.revoked_token import RevokedToken
from ..models.user import User
from ..schemas.auth import RegisterIn

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.scalar(select(User).where(User.email == normalize_email(email)))


def login(session: Session, email: str, password: str) -> tuple[User, str]:
    """Check credentials and open a session. Returns the user and its access token."""
    user = get_user_by_email(session, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("login failed (email=%s)", email)
        raise InvalidCredentials("Invalid credentials.")
    logger.info("user logged in (user_id=%s, role=%s)", user.id, user.role)
    return user, create_access_token(str(user.id))


def register(session: Session, payload: RegisterIn) -> User:
    email = normalize_email(payload.email)
    if get_user_by_email(session, email):
        raise DuplicateEmail("A user with this email already exists.")

    user = User(
        name=payload.name.strip(),
        war_name=payload.war_name.strip() or None,
        rank=payload.rank.strip() or None,
        email=email,
        password_hash=hash_password(payload.password),
        # Self-registration never grants elevated roles.
        role="employee",
        department=payload.department.strip() or None,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("user registered (user_id=%s)", user.id)
    return user


def logout(session: Session, token_payload: dict) -> None:
    jti = token_payload.get("jti")
    if not jti:
        return
    now = datetime.now(timezone.utc)
    # Expired tokens fail decoding on their own, so their rows are dropped here.
    session.execute(delete(RevokedToken).where(RevokedToken.expires_at < now))
    if session.get(RevokedToken, jti) is None:
        session.add(
            RevokedToken(
                jti=jti,
                user_id=int(token_payload["sub"]),
                revoked_at=now,
                expires_at=datetime.fromtimestamp(int(token_payload["exp"]), timezone.utc),
            )
        )
    session.commit()
    logger.info("user logged out (user_id=%s)", token_payload.get("sub"))
