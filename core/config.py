# Файл конфігурації, завантажує змінні з .env
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseSettings):
    model_config = ConfigDict(extra="ignore", env_file=".env")

    # 1. Firebase
    # Якщо шлях не задано, використовуються Application Default Credentials
    FIREBASE_SERVICE_ACCOUNT_KEY_PATH: str | None = None

    # 2. Колекції Firestore
    EXPENSES_COLLECTION: str = "expenses"
    INCOMES_COLLECTION: str = "incomes"

    # 3. CORS (кома-сепарейтед)
    FRONTEND_ORIGIN: str = ""

    # 4. Запити без токена виконуються від імені local-dev
    ALLOW_DEV_USER: bool = False

    # 5. Логування
    LOG_LEVEL: str = "INFO"

    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.FRONTEND_ORIGIN.split(",") if o.strip()]
        return origins or list(DEV_ORIGINS)


settings = Settings()
