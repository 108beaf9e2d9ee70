import io
from datetime import datetime

import pytest
from openpyxl import Workbook

from assettrack.core.errors import ParseError
from assettrack.services.spreadsheet import read_rows


def _xlsx(rows):
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_reads_first_sheet_as_header_keyed_rows():
    content = _xlsx(
        [
            ["Type", "Serial Number", "Assigned To", "Date Assigned"],
            ["Laptop", "L-1", "Alice", datetime(2024, 2, 3)],
            ["Printer", 12345, None, None],
            [None, None, None, None],
        ]
    )
    rows = read_rows("devices.xlsx", content)
    assert rows == [
        {"Type": "Laptop", "Serial Number": "L-1", "Assigned To": "Alice", "Date Assigned": "2024-02-03"},
        {"Type": "Printer", "Serial Number": "12345"},
    ]


def test_reads_csv():
    content = b"type,serial\nrouter,R-1\n,\n"
    assert read_rows("devices.csv", content) == [{"type": "router", "serial": "R-1"}]


def test_rejects_unknown_extension():
    with pytest.raises(ParseError):
        read_rows("devices.txt", b"whatever")


def test_rejects_corrupt_workbook():
    with pytest.raises(ParseError):
        read_rows("devices.xlsx", b"not a zip file")


def test_rejects_empty_upload():
    with pytest.raises(ParseError):
        read_rows("devices.xlsx", b"")


def test_rejects_legacy_xls():
    with pytest.raises(ParseError, match="Please upload an Excel file"):
        read_rows("devices.xls", b"\xd0\xcf\x11\xe0legacy")
