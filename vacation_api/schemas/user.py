from datetime import datetime
from pydantic import BaseModel


class UserOut(BaseModel):
    id: int
    name: str
    war_name: str | None = None
    rank: str | None = None
    email: str
    role: str
    department: str | None = None
    supervisor_id: int | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
