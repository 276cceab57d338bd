from datetime import date, datetime, timezone
from io import BytesIO
from typing import Any, Iterable, Mapping, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DATE_FORMAT = "yyyy-mm-dd"


def _cell_value(value: Any) -> Any:
    # xlsx не зберігає таймзону: пишемо UTC без зсуву
    if isinstance(value, datetime) and value.tzinfo:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def build_workbook(
    records: Iterable[Mapping[str, Any]],
    columns: Sequence[Tuple[str, str, int]],
    sheet_title: str,
) -> bytes:
    """
    Будує xlsx-книгу з одним аркушем: рядок заголовків і по рядку на кожен запис.
    Порядок записів зберігається, числа й дати пишуться без перетворення в текст.
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_title

    worksheet.append([header for header, _, _ in columns])
    for index, (_, _, width) in enumerate(columns, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    for record in records:
        worksheet.append([_cell_value(record.get(field)) for _, field, _ in columns])

    for row in worksheet.iter_rows(min_row=2):
        for cell in row:
            if isinstance(cell.value, (date, datetime)):
                cell.number_format = DATE_FORMAT

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
