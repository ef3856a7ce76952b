import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from uuid import UUID

from app.database import get_session
from app.models.income import Income
from app.schemas.income import IncomeCreate, IncomeList, IncomeRead
from app.core.security import get_current_user
from app.utils.financial import sum_monthly_equivalent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/income", tags=["income"])


@router.post("", response_model=IncomeRead)
@router.post("/", response_model=IncomeRead)
def create_income(
    income_data: IncomeCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    income = Income(**income_data.model_dump(), user_id=user_id)
    session.add(income)
    session.commit()
    session.refresh(income)
    logger.info("Ingreso %s registrado para %s", income.id, user_id)
    return income


@router.get("", response_model=IncomeList)
@router.get("/", response_model=IncomeList)
def list_income(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    incomes = session.exec(
        select(Income)
        .where(Income.user_id == user_id)
        .order_by(Income.created_at.desc())
    ).all()

    return IncomeList(
        items=[IncomeRead.model_validate(i) for i in incomes],
        monthly_total=sum_monthly_equivalent(incomes),
    )


@router.delete("/{income_id}")
def delete_income(
    income_id: UUID,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    income = session.exec(
        select(Income).where(Income.id == income_id, Income.user_id == user_id)
    ).first()

    if not income:
        raise HTTPException(status_code=404, detail="Ingreso no encontrado")

    session.delete(income)
    session.commit()
    logger.info("Ingreso %s eliminado", income_id)
    return {"message": "Ingreso eliminado correctamente"}
