from datetime import datetime, timedelta, timezone
from io import BytesIO

from openpyxl import load_workbook

from models.record import EXPENSE, INCOME
from services.export_service import build_workbook


def _load(content):
    return load_workbook(BytesIO(content)).active


def test_empty_export_has_only_header_row():
    worksheet = _load(build_workbook([], EXPENSE.columns, EXPENSE.title))

    assert worksheet.max_row == 1
    assert [cell.value for cell in worksheet[1]] == ["Category", "Amount", "Date"]


def test_income_headers_and_column_widths():
    worksheet = _load(build_workbook([], INCOME.columns, INCOME.title))

    assert worksheet.title == "Income"
    assert [cell.value for cell in worksheet[1]] == ["Source", "Amount", "Date"]
    assert worksheet.column_dimensions["A"].width == 20
    assert worksheet.column_dimensions["B"].width == 15
    assert worksheet.column_dimensions["C"].width == 15


def test_rows_follow_input_order_without_resorting():
    records = [
        {"source": "Old", "amount": 1.0, "date": datetime(2020, 1, 1)},
        {"source": "New", "amount": 2.0, "date": datetime(2024, 1, 1)},
    ]

    worksheet = _load(build_workbook(records, INCOME.columns, INCOME.title))

    assert [row[0] for row in worksheet.iter_rows(min_row=2, values_only=True)] == ["Old", "New"]


def test_values_keep_native_types():
    records = [{"category": "Food", "amount": 12.5, "date": datetime(2024, 1, 5, tzinfo=timezone.utc)}]

    worksheet = _load(build_workbook(records, EXPENSE.columns, EXPENSE.title))
    label, amount, date = worksheet[2]

    assert label.value == "Food"
    assert amount.data_type == "n"
    assert amount.value == 12.5
    assert date.is_date
    assert date.value == datetime(2024, 1, 5)
    assert date.number_format == "yyyy-mm-dd"


def test_extra_fields_are_ignored():
    records = [{"category": "Food", "amount": 3, "date": datetime(2024, 1, 1), "icon": "x", "id": "abc"}]

    worksheet = _load(build_workbook(records, EXPENSE.columns, EXPENSE.title))

    assert worksheet.max_column == 3


def test_aware_dates_are_converted_to_utc_before_writing():
    kyiv = timezone(timedelta(hours=2))
    records = [{"category": "Food", "amount": 1, "date": datetime(2024, 1, 5, 0, 30, tzinfo=kyiv)}]

    worksheet = _load(build_workbook(records, EXPENSE.columns, EXPENSE.title))

    assert worksheet["C2"].value == datetime(2024, 1, 4, 22, 30)
