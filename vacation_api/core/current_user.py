from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import jwt

from ..db import get_session
from ..models.user import User
from ..models.revoked_token import RevokedToken
from .security import decode_token

bearer = HTTPBearer(auto_error=False)

def get_token_payload(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    session: Session = Depends(get_session),
) -> dict:
    if not creds:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        payload = decode_token(creds.credentials)
        int(payload["sub"])
    except (jwt.PyJWTError, KeyError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")

    if payload.get("jti") and session.get(RevokedToken, payload["jti"]):
        raise HTTPException(status_code=401, detail="Token revoked")
    return payload

def get_current_user(
    payload: dict = Depends(get_token_payload),
    session: Session = Depends(get_session),
) -> User:
    user = session.get(User, int(payload["sub"]))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Forbidden")
    return user
