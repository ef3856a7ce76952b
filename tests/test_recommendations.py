from types import SimpleNamespace

import pytest

from app.models.enums import InvestmentHorizon, RiskTolerance
from app.utils.recommendations import (
    EMERGENCY_PRIORITY_ADVICE,
    HORIZON_ADVICE,
    NEGATIVE_SAVINGS_ADVICE,
    RISK_TIERS,
    format_whole_amount,
    generate_recommendations,
)


def monthly(amount):
    return {"amount": amount, "frequency": "monthly"}


@pytest.mark.parametrize(
    "profile",
    [
        None,
        {},
        {"risk_tolerance": "moderate"},
        {"investment_horizon": "long"},
        {"risk_tolerance": "", "investment_horizon": "long"},
        {"risk_tolerance": "moderate", "investment_horizon": ""},
        {"risk_tolerance": None, "investment_horizon": None},
    ],
)
def test_incomplete_profile_returns_none(profile):
    assert generate_recommendations(profile, [{"balance": 1e6}], [monthly(5000)], [monthly(10)]) is None


@pytest.mark.parametrize("tolerance", list(RiskTolerance))
def test_allocation_sums_to_100(tolerance):
    assert sum(RISK_TIERS[tolerance].allocation.values()) == 100
    bundle = generate_recommendations(
        {"risk_tolerance": tolerance.value, "investment_horizon": "medium"}, [], [], []
    )
    assert sum(bundle.allocation.values()) == 100


@pytest.mark.parametrize(
    "tolerance, months", [("conservative", 6), ("moderate", 4), ("aggressive", 3)]
)
def test_emergency_fund_by_tier(tolerance, months):
    bundle = generate_recommendations(
        {"risk_tolerance": tolerance, "investment_horizon": "medium"}, [], [], [monthly(1000)]
    )
    assert bundle.emergency_fund == pytest.approx(1000 * months)


def test_emergency_fund_scales_linearly_with_expenses():
    profile = {"risk_tolerance": "moderate", "investment_horizon": "short"}
    expenses = [{"amount": 900, "frequency": "quarterly"}, monthly(450), {"amount": 2400, "frequency": "annual"}]
    doubled = [{**e, "amount": e["amount"] * 2} for e in expenses]

    single = generate_recommendations(profile, [], [], expenses)
    double = generate_recommendations(profile, [], [], doubled)
    assert double.emergency_fund == pytest.approx(2 * single.emergency_fund)


def test_conservative_long_horizon_scenario():
    bundle = generate_recommendations(
        {"risk_tolerance": "conservative", "investment_horizon": "long"},
        [{"balance": 500}],
        [monthly(2000)],
        [monthly(1000)],
    )
    base = list(RISK_TIERS[RiskTolerance.conservative].advice)

    assert bundle.risk_profile == RiskTolerance.conservative
    assert bundle.emergency_fund == pytest.approx(6000)
    assert len(bundle.advice) == 7
    assert bundle.advice[0] == EMERGENCY_PRIORITY_ADVICE.format(amount="6000")
    assert bundle.advice[1:5] == base
    assert bundle.advice[5] == HORIZON_ADVICE[InvestmentHorizon.long]
    assert bundle.advice[6] == "Avec 1000€ d'épargne mensuelle, mettez en place des virements automatiques"


def test_aggressive_with_zero_flows_gets_warning_line():
    bundle = generate_recommendations(
        {"risk_tolerance": "aggressive", "investment_horizon": "medium"}, [], [], []
    )
    assert bundle.advice[-1] == NEGATIVE_SAVINGS_ADVICE
    assert not any("d'épargne mensuelle" in line for line in bundle.advice)
    # sin gastos el fondo de emergencia es 0 y no hay prioridad
    assert bundle.emergency_fund == 0
    assert bundle.advice[0] == RISK_TIERS[RiskTolerance.aggressive].advice[0]


def test_medium_horizon_adds_no_line():
    bundle = generate_recommendations(
        {"risk_tolerance": "moderate", "investment_horizon": "medium"},
        [{"balance": 100000}],
        [monthly(3000)],
        [monthly(1000)],
    )
    assert bundle.advice == list(RISK_TIERS[RiskTolerance.moderate].advice) + [
        "Avec 2000€ d'épargne mensuelle, mettez en place des virements automatiques"
    ]


def test_short_horizon_line():
    bundle = generate_recommendations(
        {"risk_tolerance": "moderate", "investment_horizon": "short"}, [{"balance": 10}], [], []
    )
    assert HORIZON_ADVICE[InvestmentHorizon.short] in bundle.advice


def test_no_priority_when_balance_covers_fund():
    bundle = generate_recommendations(
        {"risk_tolerance": "conservative", "investment_horizon": "long"},
        [{"balance": 6000}],
        [monthly(2000)],
        [monthly(1000)],
    )
    assert not bundle.advice[0].startswith("PRIORITÉ")
    assert len(bundle.advice) == 6


def test_uses_monthly_equivalent_of_all_frequencies():
    bundle = generate_recommendations(
        {"risk_tolerance": "aggressive", "investment_horizon": "long"},
        [],
        [{"amount": 24000, "frequency": "annual"}],
        [{"amount": 300, "frequency": "quarterly"}, {"amount": 9999, "frequency": "one_time"}],
    )
    assert bundle.emergency_fund == pytest.approx(300)
    assert "Avec 1900€ d'épargne mensuelle, mettez en place des virements automatiques" in bundle.advice


def test_rounding_is_half_up():
    assert format_whole_amount(2.5) == "3"
    assert format_whole_amount(1234.49) == "1234"
    assert format_whole_amount(0) == "0"


def test_accepts_objects_and_enum_values():
    profile = SimpleNamespace(risk_tolerance=RiskTolerance.moderate, investment_horizon=InvestmentHorizon.long)
    accounts = [SimpleNamespace(balance=10000)]
    bundle = generate_recommendations(profile, accounts, [SimpleNamespace(amount=1500, frequency="monthly")], [])
    assert bundle.risk_profile == RiskTolerance.moderate
    assert [i.name for i in bundle.investments] == [i.name for i in RISK_TIERS[RiskTolerance.moderate].investments]


def test_bundle_does_not_leak_static_tables():
    profile = {"risk_tolerance": "conservative", "investment_horizon": "short"}
    first = generate_recommendations(profile, [], [], [])
    first.advice.append("modifié")
    first.allocation["Autre"] = 1

    second = generate_recommendations(profile, [], [], [])
    assert "modifié" not in second.advice
    assert "Autre" not in second.allocation
    assert second == generate_recommendations(profile, [], [], [])


def test_huge_and_infinite_amounts_do_not_raise():
    profile = {"risk_tolerance": "moderate", "investment_horizon": "long"}

    bundle = generate_recommendations(profile, [], [{"amount": float("inf"), "frequency": "monthly"}], [])
    assert bundle.advice[-1] == NEGATIVE_SAVINGS_ADVICE

    bundle = generate_recommendations(profile, [], [], [{"amount": 1e308, "frequency": "monthly"}] * 2)
    assert bundle.emergency_fund == float("inf")
    assert bundle.advice[0] == EMERGENCY_PRIORITY_ADVICE.format(amount="inf")


def test_format_whole_amount_extremes():
    assert format_whole_amount(float("inf")) == "inf"
    assert format_whole_amount(float("nan")) == "nan"
    assert format_whole_amount(1e30) == "1" + "0" * 30
