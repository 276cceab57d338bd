import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin.auth import InvalidIdTokenError, ExpiredIdTokenError

import core.firebase as firebase
from core.config import settings
from models.record import EXPENSE, INCOME
from services.record_service import RecordService
from services.record_store import FirestoreRecordStore

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

DEV_USER_UID = "local-dev"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> dict:
    """
    Перевіряє Firebase ID Token (приходить як Bearer token).
    Без токена: 401, або локальний користувач, якщо увімкнено ALLOW_DEV_USER.
    Прострочений/невірний токен: 401, щоб фронт оновив сесію.
    """
    if not creds or not creds.credentials:
        if settings.ALLOW_DEV_USER:
            return {"uid": DEV_USER_UID}
        raise _unauthorized("Not authenticated")

    if firebase.auth_client is None:
        firebase.initialize_firebase()

    try:
        # Невеликий допуск по часу (макс 60 сек за Firebase SDK)
        return firebase.auth_client.verify_id_token(creds.credentials, clock_skew_seconds=60)
    except (ExpiredIdTokenError, InvalidIdTokenError) as e:
        logger.warning("Token validation failed: %s", e)
        raise _unauthorized("Token invalid or expired")
    except Exception as e:
        logger.warning("Token validation error: %s", e)
        raise _unauthorized("Could not validate credentials")


def get_current_user_id(current_user: dict = Depends(get_current_user)) -> str:
    return current_user["uid"]


def get_db():
    return firebase.ensure_initialized()


def get_expense_service(db=Depends(get_db)) -> RecordService:
    return RecordService(FirestoreRecordStore(db, settings.EXPENSES_COLLECTION), EXPENSE)


def get_income_service(db=Depends(get_db)) -> RecordService:
    return RecordService(FirestoreRecordStore(db, settings.INCOMES_COLLECTION), INCOME)
