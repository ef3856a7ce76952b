import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session
from uuid import UUID

from app.database import get_session
from app.core.security import get_current_user
from app.schemas.profile import ProfileRead, ProfileUpdate
from app.utils.account_helpers import get_or_create_profile
from app.utils.dates import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileRead)
@router.get("/", response_model=ProfileRead)
def read_profile(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_or_create_profile(session, user_id)


@router.put("", response_model=ProfileRead)
@router.put("/", response_model=ProfileRead)
def update_profile(
    profile_data: ProfileUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Reemplazo completo: los campos que no se envían vuelven a su valor
    por defecto, no se conservan los anteriores.
    """
    profile = get_or_create_profile(session, user_id)

    for field, value in profile_data.model_dump().items():
        setattr(profile, field, value)
    profile.updated_at = utc_now()

    session.add(profile)
    session.commit()
    session.refresh(profile)
    logger.info("Perfil de %s actualizado (completo=%s)", user_id, profile.is_complete)
    return profile
