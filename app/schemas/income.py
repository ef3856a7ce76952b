from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID
from typing import List

from app.models.enums import Frequency
from app.utils.financial import MAX_AMOUNT

class IncomeCreate(BaseModel):
    source: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    frequency: Frequency = Frequency.monthly

class IncomeRead(IncomeCreate):
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class IncomeList(BaseModel):
    items: List[IncomeRead]
    monthly_total: float
