import argparse
import logging
import sys
from pathlib import Path

from contacts_app.adapters.memory import InMemoryContactRepo
from contacts_app.adapters.seed import seed_contacts
from contacts_app.adapters.sqlite.migrator import SQLiteMigrator
from contacts_app.adapters.sqlite.repos import SQLiteContactRepo
from contacts_app.app_shell.root import root_action, root_loader
from contacts_app.components.contacts import ContactRepoPort, ContactService
from contacts_app.components.search import serialize_form
from contacts_app.rules.loader import load_rules
from contacts_app.rules.models import Rules

logger = logging.getLogger("cli")

DATA_DIR = "data"
RULES_PATH = "rules.yaml"
MIGRATIONS_DIR = "migrations"


def get_rules(rules_path: str) -> Rules:
    path = Path(rules_path)
    if not path.exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)
    return load_rules(path)


def get_repo(args: argparse.Namespace) -> ContactRepoPort:
    if args.store == "memory":
        return InMemoryContactRepo()
    data_dir = Path(args.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    db_path = str(data_dir / "contacts.db")
    SQLiteMigrator(db_path, args.migrations_dir).run_migrations()
    return SQLiteContactRepo(db_path)


def handle_migrate(args: argparse.Namespace) -> None:
    db_path = Path(args.data_dir) / "contacts.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(str(db_path), args.migrations_dir).run_migrations()
    print(f"Applied {len(applied)} migration(s) to {db_path}.")


def handle_seed(repo: ContactRepoPort, args: argparse.Namespace) -> None:
    count = seed_contacts(repo, force=args.force)
    print(f"Seeded {count} contacts.")


def handle_list(service: ContactService, args: argparse.Namespace) -> None:
    url = "/"
    if args.query is not None:
        url = "/" + serialize_form({"query": args.query})
    data = root_loader(url, service)
    if not data.contacts:
        print("No contacts")
        return
    for contact in data.contacts:
        star = " ★" if contact.favorite else ""
        print(f"{contact.id}  {contact.display_name or '(No Name)'}{star}")


def handle_new(service: ContactService, rules: Rules) -> None:
    print(root_action(service, rules.navigation.edit_path))


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("contacts_app.api.main:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Contacts CLI")
    parser.add_argument("--data-dir", default=DATA_DIR, help="Directory holding contacts.db")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    parser.add_argument("--migrations-dir", default=MIGRATIONS_DIR)
    parser.add_argument("--store", choices=["sqlite", "memory"], default="sqlite")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")

    seed_parser = subparsers.add_parser("seed", help="Insert sample contacts")
    seed_parser.add_argument("--force", action="store_true", help="Seed even if not empty")

    list_parser = subparsers.add_parser("list", help="List contacts")
    list_parser.add_argument("--query", default=None, help="Filter by name")

    subparsers.add_parser("new", help="Create an empty contact and print its edit path")

    serve_parser = subparsers.add_parser("serve", help="Run the web app")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "migrate":
        handle_migrate(args)
        return
    if args.command == "serve":
        handle_serve(args)
        return

    rules = get_rules(args.rules)
    repo = get_repo(args)
    service = ContactService(repo, contact_rules=rules.contacts, search_rules=rules.search)

    if args.command == "seed":
        handle_seed(repo, args)
    elif args.command == "list":
        handle_list(service, args)
    elif args.command == "new":
        handle_new(service, rules)


if __name__ == "__main__":
    main()
