"""
Recomendaciones de inversión basadas en reglas.

Con el perfil de riesgo/horizonte del usuario y sus agregados mensuales
se elige uno de tres paquetes fijos (prudente, moderado, dinámico), se
calcula el fondo de emergencia y se añaden consejos según el ahorro
mensual y el horizonte. No hay E/S ni estado: misma entrada, misma salida.
"""
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple

from app.models.enums import InvestmentHorizon, RiskTolerance
from app.schemas.recommendation import InvestmentSuggestion, RecommendationBundle
from app.utils.financial import get_field, sum_monthly_equivalent, total_balance


@dataclass(frozen=True)
class RiskTier:
    emergency_months: int
    investments: Tuple[InvestmentSuggestion, ...]
    allocation: Mapping[str, int]
    advice: Tuple[str, ...]


RISK_TIERS: Mapping[RiskTolerance, RiskTier] = MappingProxyType({
    RiskTolerance.conservative: RiskTier(
        emergency_months=6,
        investments=(
            InvestmentSuggestion(name="Livret A", type="Épargne sécurisée", rate_label="3%", risk_label="Très faible"),
            InvestmentSuggestion(name="LDDS", type="Épargne sécurisée", rate_label="3%", risk_label="Très faible"),
            InvestmentSuggestion(name="Fonds euros (Assurance vie)", type="Épargne garantie", rate_label="2-3%", risk_label="Très faible"),
        ),
        allocation=MappingProxyType({
            "Épargne de sécurité": 70,
            "Fonds euros": 25,
            "Obligations": 5,
        }),
        advice=(
            "Constituez d'abord une épargne de sécurité équivalente à 6 mois de dépenses",
            "Maximisez vos livrets réglementés (Livret A, LDDS)",
            "Privilégiez les fonds euros en assurance vie pour la sécurité",
            "Évitez les placements volatils et risqués",
        ),
    ),
    RiskTolerance.moderate: RiskTier(
        emergency_months=4,
        investments=(
            InvestmentSuggestion(name="Livret A / LDDS", type="Épargne sécurisée", rate_label="3%", risk_label="Très faible"),
            InvestmentSuggestion(name="Assurance vie (Fonds euros + UC)", type="Mixte", rate_label="3-5%", risk_label="Modéré"),
            InvestmentSuggestion(name="PEA avec ETF World", type="Actions diversifiées", rate_label="6-8%", risk_label="Modéré"),
            InvestmentSuggestion(name="SCPI", type="Immobilier", rate_label="4-6%", risk_label="Modéré"),
        ),
        allocation=MappingProxyType({
            "Épargne de sécurité": 40,
            "Fonds euros": 20,
            "Actions (ETF)": 30,
            "Immobilier (SCPI)": 10,
        }),
        advice=(
            "Constituez une épargne de sécurité de 4 mois de dépenses",
            "Diversifiez entre épargne sécurisée et investissements",
            "Investissez progressivement dans un ETF World via un PEA",
            "Envisagez les SCPI pour diversifier dans l'immobilier",
        ),
    ),
    RiskTolerance.aggressive: RiskTier(
        emergency_months=3,
        investments=(
            InvestmentSuggestion(name="Livret A", type="Épargne de secours", rate_label="3%", risk_label="Très faible"),
            InvestmentSuggestion(name="PEA avec ETF World/Sectoriels", type="Actions", rate_label="7-10%", risk_label="Élevé"),
            InvestmentSuggestion(name="Assurance vie en UC", type="Actions", rate_label="6-9%", risk_label="Élevé"),
            InvestmentSuggestion(name="Crypto-monnaies", type="Actifs volatils", rate_label="Variable", risk_label="Très élevé"),
            InvestmentSuggestion(name="Actions individuelles", type="Bourse", rate_label="Variable", risk_label="Très élevé"),
        ),
        allocation=MappingProxyType({
            "Épargne de sécurité": 20,
            "Actions (ETF)": 50,
            "Actions sectorielles": 20,
            "Crypto / Alternatifs": 10,
        }),
        advice=(
            "Gardez 3 mois de dépenses en épargne de sécurité",
            "Investissez massivement dans les actions via ETF (PEA)",
            "Diversifiez avec des ETF sectoriels pour maximiser les gains",
            "Allouez une petite partie aux actifs à haut risque (crypto, actions)",
            "Investissez sur le long terme et restez patient face à la volatilité",
        ),
    ),
})

HORIZON_ADVICE: Mapping[InvestmentHorizon, str] = MappingProxyType({
    InvestmentHorizon.short: "Avec un horizon court terme, privilégiez la sécurité et la liquidité",
    InvestmentHorizon.long: "Avec un horizon long terme, vous pouvez prendre plus de risques pour de meilleurs rendements",
})

POSITIVE_SAVINGS_ADVICE = "Avec {amount}€ d'épargne mensuelle, mettez en place des virements automatiques"
NEGATIVE_SAVINGS_ADVICE = "Attention : vos dépenses dépassent vos revenus. Réduisez vos dépenses avant d'investir"
EMERGENCY_PRIORITY_ADVICE = "PRIORITÉ : Constituez d'abord votre épargne de sécurité ({amount}€)"


_WHOLE_AMOUNT_CONTEXT = Context(prec=400)


def format_whole_amount(value: float) -> str:
    """Redondeo a euros enteros, .5 hacia arriba. inf y NaN se devuelven tal cual."""
    if not math.isfinite(value):
        return str(value)
    # precisión suficiente para cualquier float finito (hasta ~1.8e308)
    return str(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP, context=_WHOLE_AMOUNT_CONTEXT))


def _as_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def resolve_tier(risk_tolerance: Any) -> RiskTier:
    # Un valor desconocido cae en el paquete dinámico
    tolerance = _as_enum(RiskTolerance, risk_tolerance) or RiskTolerance.aggressive
    return RISK_TIERS[tolerance]


def is_profile_complete(profile: Any) -> bool:
    return bool(get_field(profile, "risk_tolerance")) and bool(get_field(profile, "investment_horizon"))


def generate_recommendations(
    profile: Any,
    accounts: Iterable[Any],
    income: Iterable[Any],
    expenses: Iterable[Any],
) -> Optional[RecommendationBundle]:
    """
    Devuelve None si el perfil está incompleto (falta tolerancia al riesgo
    u horizonte). El llamador debe mostrar entonces la invitación a
    completar el perfil, no un error.
    """
    if not is_profile_complete(profile):
        return None

    risk_tolerance = get_field(profile, "risk_tolerance")
    horizon = get_field(profile, "investment_horizon")
    tier = resolve_tier(risk_tolerance)

    balance = total_balance(accounts)
    monthly_income = sum_monthly_equivalent(income)
    monthly_expenses = sum_monthly_equivalent(expenses)
    monthly_savings = monthly_income - monthly_expenses

    emergency_fund = monthly_expenses * tier.emergency_months

    advice = list(tier.advice)

    horizon_line = HORIZON_ADVICE.get(_as_enum(InvestmentHorizon, horizon))
    if horizon_line:
        advice.append(horizon_line)

    if monthly_savings > 0:
        advice.append(POSITIVE_SAVINGS_ADVICE.format(amount=format_whole_amount(monthly_savings)))
    else:
        advice.append(NEGATIVE_SAVINGS_ADVICE)

    # La prioridad va siempre en primera posición
    if balance < emergency_fund:
        advice.insert(0, EMERGENCY_PRIORITY_ADVICE.format(amount=format_whole_amount(emergency_fund)))

    return RecommendationBundle(
        risk_profile=_as_enum(RiskTolerance, risk_tolerance) or RiskTolerance.aggressive,
        investment_horizon=_as_enum(InvestmentHorizon, horizon) or InvestmentHorizon.medium,
        emergency_fund=emergency_fund,
        investments=list(tier.investments),
        allocation=dict(tier.allocation),
        advice=advice,
    )
