# Сервісний шар для записів доходів та витрат
import logging
from datetime import datetime, timezone
from typing import List, Union

from core.errors import ServerError, ValidationError
from models.record import RecordCreate, RecordInDB, RecordKind
from services.export_service import build_workbook
from services.record_store import OWNER_FIELD, RecordStore

logger = logging.getLogger(__name__)


def parse_record_date(value: Union[str, int, float]) -> datetime:
    """
    Повертає datetime в UTC, так само як Firestore віддає його при читанні.
    Числа вважаються мітками часу в мілісекундах, дата без часу стає опівніччю,
    рядок без зсуву вважається UTC.
    """
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)

    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class RecordService:
    """
    Операції над однією колекцією записів (витрати або доходи).
    Сховище передається явно, тож у тестах його можна підмінити.
    """

    def __init__(self, store: RecordStore, kind: RecordKind):
        self.store = store
        self.kind = kind

    def create(self, owner_id: str, payload: RecordCreate) -> RecordInDB:
        label = getattr(payload, self.kind.label_field)
        if not label or not payload.amount or not payload.date:
            raise ValidationError("All fields are required")

        try:
            data = {
                OWNER_FIELD: owner_id,
                "icon": payload.icon,
                self.kind.label_field: label,
                "amount": payload.amount,
                "date": parse_record_date(payload.date),
                "created_at": datetime.now(timezone.utc),
            }
            record_id = self.store.add(data)
        except Exception:
            logger.exception("Failed to create %s for user %s", self.kind.name, owner_id)
            raise ServerError()

        logger.info("Created %s %s for user %s", self.kind.name, record_id, owner_id)
        return self.kind.record_model(id=record_id, **data)

    def list(self, owner_id: str) -> List[RecordInDB]:
        try:
            docs = self.store.list_by_owner(owner_id)
            return [self.kind.record_model(**doc) for doc in docs]
        except Exception:
            logger.exception("Failed to list %s records for user %s", self.kind.name, owner_id)
            raise ServerError()

    def delete(self, owner_id: str, record_id: str) -> str:
        """
        Видаляє запис, лише якщо він належить owner_id.
        Неіснуючий або чужий запис не змінюється, відповідь та сама.
        """
        try:
            doc = self.store.get(record_id)
            if doc is not None and doc.get(OWNER_FIELD) == owner_id:
                self.store.delete(record_id)
                logger.info("Deleted %s %s for user %s", self.kind.name, record_id, owner_id)
            elif doc is not None:
                logger.warning(
                    "User %s tried to delete %s %s owned by another user",
                    owner_id, self.kind.name, record_id,
                )
        except Exception:
            logger.exception("Failed to delete %s %s", self.kind.name, record_id)
            raise ServerError()

        return self.kind.deleted_message

    def export(self, owner_id: str) -> bytes:
        records = self.list(owner_id)
        try:
            return build_workbook(
                (record.model_dump() for record in records),
                self.kind.columns,
                self.kind.title,
            )
        except Exception:
            logger.exception("Failed to build %s workbook for user %s", self.kind.name, owner_id)
            raise ServerError()
