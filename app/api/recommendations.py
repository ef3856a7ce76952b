import json
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from uuid import UUID
from typing import List

from app.database import get_session
from app.core.security import get_current_user
from app.models.recommendation import RecommendationSnapshot
from app.schemas.recommendation import RecommendationSnapshotRead, RecommendationsResponse
from app.utils.account_helpers import load_financial_data
from app.utils.financial import sum_monthly_equivalent, total_balance
from app.utils.recommendations import generate_recommendations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def _build_response(session: Session, user_id: UUID) -> RecommendationsResponse:
    data = load_financial_data(session, user_id)
    monthly_income = sum_monthly_equivalent(data.income)
    monthly_expenses = sum_monthly_equivalent(data.expenses)

    bundle = generate_recommendations(data.profile, data.accounts, data.income, data.expenses)

    return RecommendationsResponse(
        profile_complete=bundle is not None,
        total_balance=total_balance(data.accounts),
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_savings=monthly_income - monthly_expenses,
        recommendations=bundle,
    )


def _snapshot_read(snapshot: RecommendationSnapshot) -> RecommendationSnapshotRead:
    return RecommendationSnapshotRead(
        id=snapshot.id,
        created_at=snapshot.created_at,
        advice=snapshot.recommendation_text.split("\n") if snapshot.recommendation_text else [],
        allocation_suggestion=snapshot.allocation_suggestion,
    )


@router.get("", response_model=RecommendationsResponse)
@router.get("/", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    # recommendations=None indica perfil incompleto, no es un error
    return _build_response(session, user_id)


@router.post("/snapshots", response_model=RecommendationSnapshotRead)
def save_recommendations(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    current = _build_response(session, user_id)
    bundle = current.recommendations
    if bundle is None:
        logger.warning("Snapshot rechazado para %s: perfil incompleto", user_id)
        raise HTTPException(
            status_code=400,
            detail="Completa tu perfil (tolerancia al riesgo y horizonte) para guardar recomendaciones.",
        )

    snapshot = RecommendationSnapshot(
        user_id=user_id,
        recommendation_text="\n".join(bundle.advice),
        allocation_suggestion=json.dumps({
            "allocation": bundle.allocation,
            "emergency_fund": bundle.emergency_fund,
            "monthly_savings": current.monthly_savings,
            "total_balance": current.total_balance,
        }),
    )
    session.add(snapshot)
    session.commit()
    session.refresh(snapshot)
    logger.info("Snapshot de recomendaciones %s guardado para %s", snapshot.id, user_id)
    return _snapshot_read(snapshot)


@router.get("/snapshots", response_model=List[RecommendationSnapshotRead])
def list_saved_recommendations(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    snapshots = session.exec(
        select(RecommendationSnapshot)
        .where(RecommendationSnapshot.user_id == user_id)
        .order_by(RecommendationSnapshot.created_at.desc())
    ).all()
    return [_snapshot_read(s) for s in snapshots]
