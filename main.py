import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core.config import settings
from core.errors import register_error_handlers
from core.firebase import initialize_firebase
from api.v1 import expenses, income

VERSION = "1.0.0"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_firebase()
    yield


app = FastAPI(title="Finance Tracker", version=VERSION, lifespan=lifespan)

# Налаштування CORS (щоб фронтенд мав доступ)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# --- ПІДКЛЮЧЕННЯ РОУТЕРІВ ---
app.include_router(income.router, prefix="/api/v1/income", tags=["Income"])
app.include_router(expenses.router, prefix="/api/v1/expenses", tags=["Expenses"])


@app.get("/")
def read_root():
    return {"status": "ok", "version": VERSION}
