from pydantic import BaseModel
from typing import List

class NamedAmount(BaseModel):
    name: str
    value: float

class DashboardSummary(BaseModel):
    total_balance: float
    monthly_income: float
    monthly_expenses: float
    monthly_savings: float
    accounts: List[NamedAmount]
    expenses_by_category: List[NamedAmount]
