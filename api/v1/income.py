from api.deps import get_income_service
from api.v1.records import build_router
from models.record import INCOME

router = build_router(INCOME, get_income_service)
