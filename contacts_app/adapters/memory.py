"""
In-memory contact repository.

Used for local development (CONTACTS_STORE=memory) and as the
repository double in tests.
"""

from __future__ import annotations

import logging

from contacts_app.domain.entities import Contact

logger = logging.getLogger(__name__)


class InMemoryContactRepo:
    """Dict-backed ContactRepoPort. Keeps insertion order."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._contacts: dict[str, Contact] = {}
        for contact in contacts or []:
            self.save(contact)

    def save(self, contact: Contact) -> Contact:
        self._contacts[contact.id] = contact.model_copy()
        return contact

    def get_all(self) -> list[Contact]:
        return [c.model_copy() for c in self._contacts.values()]

    def get_by_id(self, contact_id: str) -> Contact | None:
        contact = self._contacts.get(contact_id)
        return contact.model_copy() if contact else None

    def delete(self, contact_id: str) -> None:
        self._contacts.pop(contact_id, None)

    def __len__(self) -> int:
        return len(self._contacts)
