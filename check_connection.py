"""Перевірка підключення до Firestore з поточними налаштуваннями.

    python check_connection.py
"""
import logging
import sys

from core.config import settings
from core.firebase import ensure_initialized

logger = logging.getLogger("check_connection")


def check_connection() -> bool:
    logger.info("Service account key configured: %s", bool(settings.FIREBASE_SERVICE_ACCOUNT_KEY_PATH))
    try:
        db = ensure_initialized()
        # Достатньо одного читання, щоб перевірити облікові дані та мережу
        for collection in (settings.EXPENSES_COLLECTION, settings.INCOMES_COLLECTION):
            list(db.collection(collection).limit(1).stream())
    except Exception as e:
        logger.error("Firestore connection failed: %s", e)
        logger.info(
            "Common issues: wrong FIREBASE_SERVICE_ACCOUNT_KEY_PATH, "
            "missing Firestore database in the project, no network access"
        )
        return False

    logger.info("Firestore connected, project: %s", db.project)
    return True


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(message)s")
    return 0 if check_connection() else 1


if __name__ == "__main__":
    sys.exit(main())
