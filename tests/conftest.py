import os
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from contacts_app.adapters.memory import InMemoryContactRepo
from contacts_app.adapters.sqlite.migrator import SQLiteMigrator
from contacts_app.adapters.sqlite.repos import SQLiteContactRepo
from contacts_app.components.contacts import ContactService
from contacts_app.domain.entities import Contact
from contacts_app.rules.loader import load_rules
from contacts_app.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The real rules.yaml from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def sample_contacts() -> list[Contact]:
    base = datetime(2025, 1, 1, tzinfo=UTC)
    return [
        Contact(id="ana1", first="Ana", last="Jovanovic", favorite=True, created_at=base),
        Contact(id="bru1", first="Bruno", last="Okafor", created_at=base + timedelta(minutes=1)),
        Contact(id="han1", first="Hana", last="Sato", created_at=base + timedelta(minutes=2)),
        Contact(id="noname", created_at=base + timedelta(minutes=3)),
    ]


@pytest.fixture
def memory_repo(sample_contacts: list[Contact]) -> InMemoryContactRepo:
    return InMemoryContactRepo(sample_contacts)


@pytest.fixture
def service(memory_repo: InMemoryContactRepo, rules: Rules) -> ContactService:
    return ContactService(memory_repo, contact_rules=rules.contacts, search_rules=rules.search)


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Temporary SQLite DB with all migrations applied."""
    path = os.path.join(str(tmp_path), "contacts.db")
    SQLiteMigrator(path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return path


@pytest.fixture
def sqlite_repo(db_path: str) -> SQLiteContactRepo:
    return SQLiteContactRepo(db_path)
