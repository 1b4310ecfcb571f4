# core/contacts.py
from __future__ import annotations
import uuid
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from adapters.json_store import JsonStore
from core.errors import ReadFailure, WriteFailure
from settings.logging_setup import flog

CONTACT_KEYS = ("id", "name", "email", "phone")


@dataclass(frozen=True)
class Contact:
    id: str
    name: str
    email: str
    phone: str

    @classmethod
    def create(cls, name: str, email: str, phone: str) -> "Contact":
        return cls(id=str(uuid.uuid4()), name=name, email=email, phone=phone)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class RemoveOutcome(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not found"


def parse_contacts(data: Any, path: Path) -> List[Contact]:
    """
    Validate the decoded backing file: a JSON array of objects carrying exactly
    id/name/email/phone, all strings. Anything else is a ReadFailure.
    """
    if not isinstance(data, list):
        raise ReadFailure(path, f"expected a JSON array, got {type(data).__name__}")
    contacts: List[Contact] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or set(item) != set(CONTACT_KEYS):
            raise ReadFailure(path, f"record {i} must have exactly the keys {', '.join(CONTACT_KEYS)}")
        if not all(isinstance(item[k], str) for k in CONTACT_KEYS):
            raise ReadFailure(path, f"record {i} has non-string values")
        contacts.append(Contact(**{k: item[k] for k in CONTACT_KEYS}))
    return contacts


class ContactStore:
    """
    Contact list persisted as one JSON file. Each operation is a self-contained
    load -> (mutate) -> save; nothing is cached between calls and there is no
    locking, so two processes mutating the same file can lose an update.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._json = JsonStore(self.path)

    def load(self) -> List[Contact]:
        return parse_contacts(self._json.load(), self.path)

    def save(self, contacts: List[Contact]) -> None:
        self._json.save([c.to_dict() for c in contacts])

    def list(self) -> List[Contact]:
        return self.load()

    def add(self, name: str, email: str, phone: str) -> Contact:
        contact = Contact.create(name, email, phone)
        contacts = self.load()
        contacts.append(contact)
        self.save(contacts)
        flog(f"Added contact {contact.id}")
        return contact

    def find_by_id(self, contact_id: str) -> Optional[Contact]:
        for contact in self.load():
            if contact.id == contact_id:
                return contact
        flog(f"Contact {contact_id} not found")
        return None

    def remove_by_id(self, contact_id: str) -> RemoveOutcome:
        contacts = self.load()
        remaining = [c for c in contacts if c.id != contact_id]
        if len(remaining) == len(contacts):
            flog(f"Remove: contact {contact_id} not found")
            return RemoveOutcome.NOT_FOUND
        self.save(remaining)
        flog(f"Removed contact {contact_id}")
        return RemoveOutcome.REMOVED

    def init(self, force: bool = False) -> bool:
        """Create the backing file as an empty list. Returns False if it already exists and force is off."""
        if self.path.exists() and not force:
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailure(self.path, str(e)) from e
        self.save([])
        flog(f"Initialized {self.path}")
        return True
