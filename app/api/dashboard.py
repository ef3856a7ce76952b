# app/api/dashboard.py

from fastapi import APIRouter, Depends
from sqlmodel import Session
from uuid import UUID

from app.database import get_session
from app.core.security import get_current_user
from app.schemas.dashboard import DashboardSummary, NamedAmount
from app.utils.account_helpers import load_financial_data
from app.utils.financial import group_monthly_by, sum_monthly_equivalent, to_number, total_balance

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/summary", response_model=DashboardSummary)
def financial_summary(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    data = load_financial_data(session, user_id)

    monthly_income = sum_monthly_equivalent(data.income)
    monthly_expenses = sum_monthly_equivalent(data.expenses)

    return DashboardSummary(
        total_balance=total_balance(data.accounts),
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_savings=monthly_income - monthly_expenses,
        accounts=[NamedAmount(name=acc.name, value=to_number(acc.balance)) for acc in data.accounts],
        expenses_by_category=[NamedAmount(**row) for row in group_monthly_by(data.expenses, "category")],
    )
