from pydantic import BaseModel


class AdminUserOut(BaseModel):
    id: int
    name: str
    war_name: str | None = None
    rank: str | None = None
    email: str
    department: str | None = None
    role: str
    supervisor_id: int | None = None
    pending: int
    total: int


class AdminUserUpdateIn(BaseModel):
    role: str | None = None
    supervisor_id: int | None = None
