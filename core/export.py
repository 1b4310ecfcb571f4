# core/export.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

from adapters.excel_io import new_workbook, save_workbook
from core.contacts import Contact
from settings.logging_setup import flog

SHEET_TITLE = "Contacts"
HEADERS = ("ID", "Name", "Email", "Phone")


def _cell_text(value: str) -> str:
    # worksheets reject ASCII control characters
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def export_contacts(contacts: Iterable[Contact], path: Path) -> int:
    """Write contacts to a single-sheet workbook in list order. Returns the number of rows written."""
    wb, ws = new_workbook(SHEET_TITLE)
    ws.append(list(HEADERS))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    rows = 0
    for c in contacts:
        ws.append([_cell_text(v) for v in (c.id, c.name, c.email, c.phone)])
        # values are data, never formulas
        for cell in ws[ws.max_row]:
            cell.data_type = "s"
        rows += 1

    # rough fit; openpyxl has no autosize
    for col, header in zip("ABCD", HEADERS):
        width = max([len(header)] + [len(str(cell.value or "")) for cell in ws[col]])
        ws.column_dimensions[col].width = min(width + 2, 60)

    save_workbook(wb, path)
    flog(f"Exported {rows} contact(s) to {path}")
    return rows
