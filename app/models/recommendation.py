from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from app.utils.dates import utc_now

class RecommendationSnapshot(SQLModel, table=True):
    __tablename__ = "recommendation_snapshot"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    recommendation_text: str  # consejos separados por salto de línea
    allocation_suggestion: str  # JSON: allocation, emergency_fund, monthly_savings, total_balance
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
