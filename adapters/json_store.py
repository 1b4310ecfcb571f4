# adapters/json_store.py
from __future__ import annotations
from pathlib import Path
import json
import logging
import os
import stat
import tempfile
from typing import Any

from core.errors import ReadFailure, WriteFailure
from settings.logging_setup import flog


class JsonStore:
    """Whole-file JSON access; writes go through a temp file replaced over the target."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Any:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            flog(f"Read error: {self.path} does not exist", level=logging.ERROR)
            raise ReadFailure(self.path, "file does not exist") from None
        except json.JSONDecodeError as e:
            flog(f"Read error: {self.path} is not valid JSON ({e})", level=logging.ERROR)
            raise ReadFailure(self.path, f"invalid JSON: {e}") from e
        except (OSError, UnicodeDecodeError, RecursionError) as e:
            flog(f"Read error: {self.path}: {e}", level=logging.ERROR)
            raise ReadFailure(self.path, str(e)) from e
        flog(f"Loaded {self.path}", level=logging.DEBUG)
        return data

    def save(self, data: Any) -> None:
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            if self.path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            flog(f"Write error: {self.path}: {e}", level=logging.ERROR)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise WriteFailure(self.path, str(e)) from e
        flog(f"Saved {self.path}", level=logging.DEBUG)
