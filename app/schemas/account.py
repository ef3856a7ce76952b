from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID
from typing import Annotated

from app.models.enums import AccountType
from app.utils.financial import MAX_AMOUNT

class AccountCreate(BaseModel):
    name: Annotated[str, Field(min_length=1, description="Nombre de la cuenta")]
    type: AccountType = AccountType.current
    balance: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Saldo actual")

class AccountRead(AccountCreate):
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
