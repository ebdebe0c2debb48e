import logging

from contacts_app.domain.entities import Contact
from contacts_app.ports.repo import ContactRepoPort

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS: list[dict[str, str]] = [
    {"first": "Ana", "last": "Jovanovic", "twitter": "@anaj", "notes": "Organises the meetup."},
    {"first": "Bruno", "last": "Okafor", "twitter": "@bruno_ok"},
    {"first": "Chen", "last": "Liang", "twitter": "@chenliang"},
    {"first": "Dana", "last": "Kowalski"},
    {"first": "Emeka", "last": "Adeyemi", "twitter": "@emeka"},
    {"first": "Hana", "last": "Sato", "notes": "Prefers email."},
    {"first": "Ivan", "last": "Petrov"},
    {"first": "Mariana", "last": "Costa", "twitter": "@marianac"},
]


def seed_contacts(repo: ContactRepoPort, force: bool = False) -> int:
    """
    Insert the sample contacts.

    Skips seeding when the repo already holds contacts unless force is set.
    Returns the number of contacts inserted.
    """
    if repo.get_all() and not force:
        logger.info("Contact store not empty; skipping seed.")
        return 0

    for data in SAMPLE_CONTACTS:
        repo.save(Contact(**data))

    logger.info("Seeded %d contacts.", len(SAMPLE_CONTACTS))
    return len(SAMPLE_CONTACTS)
