from datetime import datetime
from pydantic import BaseModel, Field, field_validator


def strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Must not be blank.")
    return v


class DepartmentCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return strip_required(v)


class DepartmentUpdateIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return strip_required(v)


class DepartmentOut(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
