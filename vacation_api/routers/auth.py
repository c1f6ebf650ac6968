from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..schemas.auth import LoginIn, RegisterIn, TokenOut
from ..schemas.user import UserOut
from ..core.current_user import get_token_payload
from ..services import identity_service
from ..db import get_session

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, session: Session = Depends(get_session)):
    user, token = identity_service.login(session, payload.email, payload.password)
    return TokenOut(access_token=token, user=UserOut.model_validate(user))

@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: RegisterIn, session: Session = Depends(get_session)):
    return identity_service.register(session, payload)

@router.post("/logout", status_code=204)
def logout(
    token_payload: dict = Depends(get_token_payload),
    session: Session = Depends(get_session),
):
    identity_service.logout(session, token_payload)
