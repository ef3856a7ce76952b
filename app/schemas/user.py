from pydantic import BaseModel, ConfigDict, EmailStr, Field
from uuid import UUID

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserRead(BaseModel):
    id: UUID
    email: EmailStr

    model_config = ConfigDict(from_attributes=True)
