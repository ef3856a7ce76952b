from app.models.user import User
from app.models.profile import Profile
from app.models.account import Account
from app.models.income import Income
from app.models.expense import Expense
from app.models.recommendation import RecommendationSnapshot

__all__ = ["User", "Profile", "Account", "Income", "Expense", "RecommendationSnapshot"]
