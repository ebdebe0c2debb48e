import logging
import os

from contacts_app.adapters.seed import seed_contacts
from contacts_app.adapters.sqlite.migrator import SQLiteMigrator
from contacts_app.adapters.sqlite.repos import SQLiteContactRepo

logger = logging.getLogger(__name__)


def seed() -> None:
    data_dir = os.environ.get("CONTACTS_DATA_DIR", "./data")
    os.makedirs(data_dir, exist_ok=True)

    db_path = f"{data_dir}/contacts.db"
    logger.info("Seeding to %s", db_path)

    SQLiteMigrator(db_path, os.environ.get("CONTACTS_MIGRATIONS_DIR", "migrations")).run_migrations()
    count = seed_contacts(SQLiteContactRepo(db_path))
    logger.info("Inserted %d contacts.", count)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
