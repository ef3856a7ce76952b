from typing import List, NamedTuple, Optional
from uuid import UUID

from sqlmodel import Session, select

from app.models.account import Account
from app.models.expense import Expense
from app.models.income import Income
from app.models.profile import Profile


class FinancialData(NamedTuple):
    profile: Optional[Profile]
    accounts: List[Account]
    income: List[Income]
    expenses: List[Expense]


def get_or_create_profile(session: Session, user_id: UUID) -> Profile:
    """
    Devuelve el perfil del usuario; si no existe (usuarios anteriores
    al perfil automático) lo crea vacío.
    """
    profile = session.get(Profile, user_id)
    if profile:
        return profile

    profile = Profile(user_id=user_id)
    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile


def load_financial_data(session: Session, user_id: UUID) -> FinancialData:
    accounts = session.exec(select(Account).where(Account.user_id == user_id)).all()
    income = session.exec(select(Income).where(Income.user_id == user_id)).all()
    expenses = session.exec(select(Expense).where(Expense.user_id == user_id)).all()
    return FinancialData(
        profile=session.get(Profile, user_id),
        accounts=list(accounts),
        income=list(income),
        expenses=list(expenses),
    )
