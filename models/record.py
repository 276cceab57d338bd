# Pydantic моделі для записів доходів та витрат
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Type, Union

from pydantic import BaseModel, Field


# --- Запити від фронтенду ---
# Усі поля необов'язкові на рівні схеми: відсутність перевіряє сервіс і повертає 400

class RecordCreate(BaseModel):
    icon: Optional[str] = None
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    # ISO-рядок або мітка часу в мілісекундах (як Date.now() у JS)
    date: Optional[Union[str, int, float]] = None


class ExpenseCreate(RecordCreate):
    category: Optional[str] = None


class IncomeCreate(RecordCreate):
    source: Optional[str] = None


# --- Записи з бази даних ---

class RecordInDB(BaseModel):
    id: str
    user_uid: str
    icon: Optional[str] = None
    amount: float
    date: datetime
    created_at: Optional[datetime] = None


class ExpenseInDB(RecordInDB):
    category: str


class IncomeInDB(RecordInDB):
    source: str


class DeleteResponse(BaseModel):
    message: str


# --- Опис різновиду запису ---

@dataclass(frozen=True)
class RecordKind:
    name: str
    title: str
    label_field: str
    create_model: Type[RecordCreate]
    record_model: Type[RecordInDB]
    filename: str
    # (заголовок, поле, ширина колонки)
    columns: Tuple[Tuple[str, str, int], ...]

    @property
    def deleted_message(self) -> str:
        return f"{self.title} deleted successfully"


EXPENSE = RecordKind(
    name="expense",
    title="Expense",
    label_field="category",
    create_model=ExpenseCreate,
    record_model=ExpenseInDB,
    filename="expense_details.xlsx",
    columns=(
        ("Category", "category", 20),
        ("Amount", "amount", 15),
        ("Date", "date", 15),
    ),
)

INCOME = RecordKind(
    name="income",
    title="Income",
    label_field="source",
    create_model=IncomeCreate,
    record_model=IncomeInDB,
    filename="income_details.xlsx",
    columns=(
        ("Source", "source", 20),
        ("Amount", "amount", 15),
        ("Date", "date", 15),
    ),
)
