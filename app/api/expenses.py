import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from uuid import UUID

from app.database import get_session
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseList, ExpenseRead
from app.core.security import get_current_user
from app.utils.financial import sum_monthly_equivalent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseRead)
@router.post("/", response_model=ExpenseRead)
def create_expense(
    expense_data: ExpenseCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expense = Expense(**expense_data.model_dump(), user_id=user_id)
    session.add(expense)
    session.commit()
    session.refresh(expense)
    logger.info("Gasto %s registrado para %s", expense.id, user_id)
    return expense


@router.get("", response_model=ExpenseList)
@router.get("/", response_model=ExpenseList)
def list_expenses(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expenses = session.exec(
        select(Expense)
        .where(Expense.user_id == user_id)
        .order_by(Expense.created_at.desc())
    ).all()

    return ExpenseList(
        items=[ExpenseRead.model_validate(e) for e in expenses],
        monthly_total=sum_monthly_equivalent(expenses),
    )


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: UUID,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expense = session.exec(
        select(Expense).where(Expense.id == expense_id, Expense.user_id == user_id)
    ).first()

    if not expense:
        raise HTTPException(status_code=404, detail="Gasto no encontrado")

    session.delete(expense)
    session.commit()
    logger.info("Gasto %s eliminado", expense_id)
    return {"message": "Gasto eliminado correctamente"}
