from sqlmodel import SQLModel, Field
from uuid import uuid4, UUID
from datetime import datetime
from sqlalchemy import DateTime

from app.utils.dates import utc_now

class User(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(index=True, unique=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
