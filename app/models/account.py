from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from app.models.enums import AccountType
from app.utils.dates import utc_now

class Account(SQLModel, table=True):
    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str
    type: AccountType = Field(default=AccountType.current)
    balance: float = 0.0
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
