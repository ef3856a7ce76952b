from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID
from typing import List, Optional

from app.models.enums import Frequency
from app.utils.financial import MAX_AMOUNT

EXPENSE_CATEGORIES = [
    "Loyer",
    "Alimentation",
    "Transport",
    "Assurances",
    "Abonnements",
    "Loisirs",
    "Santé",
    "Éducation",
    "Autre",
]

class ExpenseCreate(BaseModel):
    category: str = Field(default=EXPENSE_CATEGORIES[0], min_length=1)
    description: Optional[str] = None
    amount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    frequency: Frequency = Frequency.monthly

class ExpenseRead(ExpenseCreate):
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ExpenseList(BaseModel):
    items: List[ExpenseRead]
    monthly_total: float
