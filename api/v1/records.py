# Спільні ендпоінти для доходів і витрат
from io import BytesIO
from typing import Callable, List

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse

from api.deps import get_current_user_id
from models.record import DeleteResponse, RecordKind
from services.export_service import XLSX_MEDIA_TYPE
from services.record_service import RecordService


def build_router(kind: RecordKind, get_service: Callable[..., RecordService]) -> APIRouter:
    router = APIRouter()

    @router.post(
        "",
        response_model=kind.record_model,
        status_code=status.HTTP_200_OK,
    )
    def create_record(
        payload: kind.create_model,
        user_uid: str = Depends(get_current_user_id),
        service: RecordService = Depends(get_service),
    ):
        """
        Створює новий запис для поточного користувача.
        """
        return service.create(user_uid, payload)

    @router.get("", response_model=List[kind.record_model])
    def list_records(
        user_uid: str = Depends(get_current_user_id),
        service: RecordService = Depends(get_service),
    ):
        """
        Усі записи поточного користувача, новіші спочатку.
        """
        return service.list(user_uid)

    @router.get("/export")
    def export_records(
        user_uid: str = Depends(get_current_user_id),
        service: RecordService = Depends(get_service),
    ):
        # Книга будується повністю до відправки заголовків
        content = service.export(user_uid)
        return StreamingResponse(
            BytesIO(content),
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f"attachment; filename={kind.filename}"},
        )

    @router.delete("/{record_id}", response_model=DeleteResponse)
    def delete_record(
        record_id: str,
        user_uid: str = Depends(get_current_user_id),
        service: RecordService = Depends(get_service),
    ):
        return DeleteResponse(message=service.delete(user_uid, record_id))

    return router
