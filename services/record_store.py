from typing import Any, Dict, List, Optional, Protocol

from google.cloud.firestore_v1.base_query import FieldFilter

OWNER_FIELD = "user_uid"


class RecordStore(Protocol):
    """Колекція записів одного типу. Документи повертаються як словники з ключем 'id'."""

    def add(self, data: Dict[str, Any]) -> str: ...

    def get(self, record_id: str) -> Optional[Dict[str, Any]]: ...

    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]: ...

    def delete(self, record_id: str) -> None: ...


class FirestoreRecordStore:
    def __init__(self, db, collection: str):
        self.db = db
        self.collection = collection

    def add(self, data: Dict[str, Any]) -> str:
        _, doc_ref = self.db.collection(self.collection).add(data)
        return doc_ref.id

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        doc = self.db.collection(self.collection).document(record_id).get()
        if not doc.exists:
            return None
        data = doc.to_dict()
        data["id"] = doc.id
        return data

    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        # Потрібен композитний індекс (user_uid ASC, date DESC)
        query = (
            self.db.collection(self.collection)
            .where(filter=FieldFilter(OWNER_FIELD, "==", owner_id))
            .order_by("date", direction="DESCENDING")
        )

        results = []
        for doc in query.stream():
            data = doc.to_dict()
            data["id"] = doc.id
            results.append(data)
        return results

    def delete(self, record_id: str) -> None:
        self.db.collection(self.collection).document(record_id).delete()
