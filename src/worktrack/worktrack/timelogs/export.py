from __future__ import annotations

import io
from typing import Iterable

from openpyxl import Workbook

from ..core.constants import EXPORT_SHEET_TITLE
from .model import ExportRow

HEADERS = ["Name", "Email", "Department", "Type", "Note", "Timestamp"]


def build_workbook(rows: Iterable[ExportRow]) -> bytes:
    """Render export rows as an .xlsx file and return its bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = EXPORT_SHEET_TITLE
    ws.append(HEADERS)

    for r in rows:
        ws.append([r.name, r.email, r.department, r.type.value, r.note, r.timestamp])

    for column, width in zip("ABCDEF", (24, 30, 18, 12, 40, 20)):
        ws.column_dimensions[column].width = width
    for cell in ws["F"][1:]:
        cell.number_format = "yyyy-mm-dd hh:mm:ss"

    out = io.BytesIO()
    wb.save(out)
    return out.getvalue()
