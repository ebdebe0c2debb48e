import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from contacts_app.adapters.memory import InMemoryContactRepo
from contacts_app.adapters.sqlite.repos import SQLiteContactRepo
from contacts_app.components.contacts import ContactRepoPort, ContactService
from contacts_app.rules.loader import load_rules
from contacts_app.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("CONTACTS_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "contacts.db")
        self.rules_path = Path(
            os.environ.get("CONTACTS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.migrations_dir = Path(
            os.environ.get("CONTACTS_MIGRATIONS_DIR", str(self.base_dir / "migrations"))
        )
        self.store = os.environ.get("CONTACTS_STORE", "sqlite")
        self.seed = os.environ.get("CONTACTS_SEED", "0") == "1"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Repos ---
@lru_cache
def get_memory_repo() -> InMemoryContactRepo:
    return InMemoryContactRepo()


def get_contact_repo(settings: Settings = Depends(get_settings)) -> ContactRepoPort:
    if settings.store == "memory":
        return get_memory_repo()
    return SQLiteContactRepo(settings.db_path)


# --- Component Services ---
def get_contact_service(
    repo: ContactRepoPort = Depends(get_contact_repo),
    rules: Rules = Depends(get_rules),
) -> ContactService:
    """Get contacts component service."""
    return ContactService(repo=repo, contact_rules=rules.contacts, search_rules=rules.search)
