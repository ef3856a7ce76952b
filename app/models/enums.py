from enum import Enum

class Frequency(str, Enum):
    monthly = "monthly"
    quarterly = "quarterly"
    annual = "annual"
    one_time = "one_time"

class AccountType(str, Enum):
    current = "current"
    savings = "savings"  # Livret A
    pea = "pea"
    life_insurance = "life_insurance"
    crypto = "crypto"
    other = "other"

class RiskTolerance(str, Enum):
    conservative = "conservative"
    moderate = "moderate"
    aggressive = "aggressive"

class InvestmentHorizon(str, Enum):
    short = "short"
    medium = "medium"
    long = "long"
