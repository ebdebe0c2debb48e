from typing import Protocol

from contacts_app.domain.entities import Contact


class RepositoryError(Exception):
    """Raised by repository adapters when the backing store fails."""


class ContactRepoPort(Protocol):
    def save(self, contact: Contact) -> Contact:
        """Insert or update a contact."""
        ...

    def get_all(self) -> list[Contact]:
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        ...

    def delete(self, contact_id: str) -> None:
        ...
