import json
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import UUID
from typing import Dict, List, Optional

from app.models.enums import InvestmentHorizon, RiskTolerance

class InvestmentSuggestion(BaseModel):
    name: str
    type: str
    rate_label: str
    risk_label: str

    model_config = ConfigDict(frozen=True)

class RecommendationBundle(BaseModel):
    risk_profile: RiskTolerance
    investment_horizon: InvestmentHorizon
    emergency_fund: float
    investments: List[InvestmentSuggestion]
    allocation: Dict[str, int]
    advice: List[str]

class RecommendationsResponse(BaseModel):
    profile_complete: bool
    total_balance: float
    monthly_income: float
    monthly_expenses: float
    monthly_savings: float
    recommendations: Optional[RecommendationBundle] = None

class AllocationSuggestion(BaseModel):
    allocation: Dict[str, int] = Field(default_factory=dict)
    emergency_fund: float = 0.0
    monthly_savings: float = 0.0
    total_balance: float = 0.0

class RecommendationSnapshotRead(BaseModel):
    id: UUID
    created_at: datetime
    advice: List[str]
    allocation_suggestion: AllocationSuggestion

    @field_validator("allocation_suggestion", mode="before")
    @classmethod
    def parse_json(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v
