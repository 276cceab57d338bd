# Test configuration and fixtures for pytest
import itertools

import pytest
from fastapi import Header
from fastapi.testclient import TestClient

from api.deps import get_current_user, get_expense_service, get_income_service
from main import app
from models.record import EXPENSE, INCOME
from services.record_service import RecordService
from services.record_store import OWNER_FIELD


class InMemoryRecordStore:
    """Test double for FirestoreRecordStore keeping documents in a dict."""

    _ids = itertools.count(1)

    def __init__(self):
        self.docs = {}

    def add(self, data):
        record_id = f"rec-{next(self._ids)}"
        self.docs[record_id] = dict(data)
        return record_id

    def get(self, record_id):
        data = self.docs.get(record_id)
        if data is None:
            return None
        return {**data, "id": record_id}

    def list_by_owner(self, owner_id):
        owned = [
            {**data, "id": record_id}
            for record_id, data in self.docs.items()
            if data[OWNER_FIELD] == owner_id
        ]
        # sorted() is stable, insertion order breaks ties
        return sorted(owned, key=lambda doc: doc["date"], reverse=True)

    def delete(self, record_id):
        self.docs.pop(record_id, None)


class BrokenRecordStore:
    """Every call fails the way an unreachable database would."""

    def _fail(self, *args, **kwargs):
        raise ConnectionError("firestore.googleapis.com unreachable")

    add = get = list_by_owner = delete = _fail


@pytest.fixture()
def expense_store():
    return InMemoryRecordStore()


@pytest.fixture()
def income_store():
    return InMemoryRecordStore()


@pytest.fixture()
def expense_service(expense_store):
    return RecordService(expense_store, EXPENSE)


@pytest.fixture()
def income_service(income_store):
    return RecordService(income_store, INCOME)


def user_from_header(x_user: str = Header(default="alice")) -> dict:
    return {"uid": x_user}


@pytest.fixture()
def anonymous_client(expense_service, income_service):
    """Client with real authentication and in-memory stores."""
    app.dependency_overrides[get_expense_service] = lambda: expense_service
    app.dependency_overrides[get_income_service] = lambda: income_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def client(anonymous_client):
    """Client whose caller identity comes from the X-User header (default alice)."""
    app.dependency_overrides[get_current_user] = user_from_header
    yield anonymous_client
