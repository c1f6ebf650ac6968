from pydantic import BaseModel, EmailStr, Field, field_validator

from .department import strip_required
from .user import UserOut


def _password_bytes_le_72(v: str) -> str:
    if len(v.encode("utf-8")) > 72:
        raise ValueError("Password must be <= 72 bytes (bcrypt limit).")
    return v


class LoginIn(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("password")
    @classmethod
    def login_password_bytes_le_72(cls, v: str) -> str:
        return _password_bytes_le_72(v)


class RegisterIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    war_name: str = Field(default="", max_length=100)
    rank: str = Field(default="", max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    department: str = Field(default="", max_length=120)

    @field_validator("name")
    @classmethod
    def register_name_not_blank(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("password")
    @classmethod
    def register_password_bytes_le_72(cls, v: str) -> str:
        return _password_bytes_le_72(v)


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
