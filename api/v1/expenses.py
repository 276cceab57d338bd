# api/v1/expenses.py

from api.deps import get_expense_service
from api.v1.records import build_router
from models.record import EXPENSE

router = build_router(EXPENSE, get_expense_service)
