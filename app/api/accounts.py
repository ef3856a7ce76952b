import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from uuid import UUID
from typing import List

from app.database import get_session
from app.models.account import Account
from app.schemas.account import AccountCreate, AccountRead
from app.core.security import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountRead)
@router.post("/", response_model=AccountRead)
def create_account(
    account_data: AccountCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    account = Account(**account_data.model_dump(), user_id=user_id)
    session.add(account)
    session.commit()
    session.refresh(account)
    logger.info("Cuenta %s creada para %s", account.id, user_id)
    return account


@router.get("", response_model=List[AccountRead])
@router.get("/", response_model=List[AccountRead])
def list_accounts(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return session.exec(
        select(Account)
        .where(Account.user_id == user_id)
        .order_by(Account.created_at.desc())
    ).all()


@router.delete("/{account_id}")
def delete_account(
    account_id: UUID,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    account = session.exec(
        select(Account).where(Account.id == account_id, Account.user_id == user_id)
    ).first()

    if not account:
        raise HTTPException(status_code=404, detail="Cuenta no encontrada")

    session.delete(account)
    session.commit()
    logger.info("Cuenta %s eliminada", account_id)
    return {"message": "Cuenta eliminada correctamente"}
