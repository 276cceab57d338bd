# Помилки шару записів та їх відображення у HTTP-відповіді
from enum import Enum

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    SERVER = "server_error"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.SERVER
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message}


class ValidationError(AppError):
    """Помилка вхідних даних, яку може виправити користувач."""

    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class ServerError(AppError):
    """
    Будь-який збій сховища чи серіалізації.
    Деталі пишуться в лог, клієнт бачить лише загальне повідомлення.
    """

    kind = ErrorKind.SERVER
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Тіло неправильної форми (наприклад, amount="abc") віддаємо як 400
    error = ValidationError("Invalid request body")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_error_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
