import logging

from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from uuid import UUID

from app.models.user import User
from app.models.profile import Profile
from app.schemas.user import UserCreate, UserRead
from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)
from app.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

def get_user_by_email(session: Session, email: str):
    return session.exec(select(User).where(User.email == email)).first()

# Registro
@router.post("/register", response_model=UserRead)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    if get_user_by_email(session, user_create.email):
        logger.warning("Registro rechazado: email ya registrado")
        raise HTTPException(status_code=400, detail="Email ya registrado")

    hashed_pwd = get_password_hash(user_create.password)
    user = User(email=user_create.email, hashed_password=hashed_pwd)
    # Usuario y perfil vacío en la misma transacción
    session.add(user)
    session.add(Profile(user_id=user.id))
    try:
        session.commit()
    except IntegrityError:
        # otro registro con el mismo email ganó la carrera
        session.rollback()
        logger.warning("Registro rechazado: email ya registrado")
        raise HTTPException(status_code=400, detail="Email ya registrado")
    session.refresh(user)

    logger.info("Usuario %s registrado", user.id)
    return UserRead(id=user.id, email=user.email)

# Login
@router.post("/login")
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = get_user_by_email(session, form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciales incorrectas")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}

# Ruta protegida
@router.get("/me")
def read_users_me(user_id: UUID = Depends(get_current_user)):
    return {"user_id": user_id}
