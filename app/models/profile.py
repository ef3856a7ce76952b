from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from app.models.enums import InvestmentHorizon, RiskTolerance
from app.utils.dates import utc_now


class Profile(SQLModel, table=True):
    # Un único perfil por usuario, la PK es el propio user_id
    user_id: UUID = Field(foreign_key="user.id", primary_key=True)
    full_name: Optional[str] = None
    age: Optional[int] = None
    monthly_income: float = 0.0
    risk_tolerance: Optional[RiskTolerance] = None
    investment_horizon: Optional[InvestmentHorizon] = None
    life_goals: Optional[str] = None
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    @property
    def is_complete(self) -> bool:
        return bool(self.risk_tolerance) and bool(self.investment_horizon)
