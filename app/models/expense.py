from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from app.models.enums import Frequency
from app.utils.dates import utc_now

class Expense(SQLModel, table=True):
    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    category: str
    description: Optional[str] = None
    amount: float
    frequency: Frequency = Field(default=Frequency.monthly)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
