# core/errors.py
from __future__ import annotations
from pathlib import Path


class ContactStoreError(Exception):
    """Base class for failures of the backing file."""

    kind = "Store error"

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ReadFailure(ContactStoreError):
    kind = "Read error"


class WriteFailure(ContactStoreError):
    kind = "Write error"
