import json

import pytest

from core.contacts import ContactStore


@pytest.fixture
def contacts_path(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def store(contacts_path):
    return ContactStore(contacts_path)


@pytest.fixture
def read_raw():
    def _read(path):
        return json.loads(path.read_text(encoding="utf-8"))
    return _read
