# adapters/excel_io.py
from __future__ import annotations
from pathlib import Path
from datetime import datetime
import openpyxl


def resolve_xlsx(path_like: str | Path) -> Path:
    p = Path(path_like).expanduser()
    if not p.is_absolute():
        p = p.resolve()
    if p.suffix == "":
        p = p.with_suffix(".xlsx")
    if p.suffix.lower() != ".xlsx":
        raise ValueError(f"Only .xlsx files are supported (got {p.suffix}).")
    return p


def default_export_path(exports_dir: Path) -> Path:
    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return exports_dir / f"contacts_{ts}.xlsx"


def new_workbook(title: str):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = title
    return wb, ws


def save_workbook(wb, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(path))
