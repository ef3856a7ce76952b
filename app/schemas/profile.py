from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from app.models.enums import InvestmentHorizon, RiskTolerance
from app.utils.financial import MAX_AMOUNT

class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    monthly_income: float = Field(default=0.0, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    risk_tolerance: Optional[RiskTolerance] = None
    investment_horizon: Optional[InvestmentHorizon] = None
    life_goals: Optional[str] = None

    @field_validator("risk_tolerance", "investment_horizon", mode="before")
    @classmethod
    def empty_as_unset(cls, v):
        # El formulario envía "" cuando el usuario no ha elegido opción
        if v == "":
            return None
        return v

    @field_validator("monthly_income", mode="before")
    @classmethod
    def income_default(cls, v):
        if v is None or v == "":
            return 0.0
        return v

class ProfileRead(ProfileUpdate):
    updated_at: datetime
    is_complete: bool

    model_config = ConfigDict(from_attributes=True)
