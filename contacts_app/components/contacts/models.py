"""
Contacts component - Data models.

Input/output records for the contact operations and the error taxonomy
raised by the data layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from contacts_app.domain.entities import Contact

# --- Errors ---


class ContactDataError(Exception):
    """Base class for failures of the contact data layer."""


class DataFetchFailure(ContactDataError):
    """Reading contacts failed."""


class DataCreateFailure(ContactDataError):
    """Creating a contact failed."""


class DataWriteFailure(ContactDataError):
    """Updating or deleting a contact failed."""


class ContactNotFound(LookupError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact with ID {contact_id} not found")
        self.contact_id = contact_id


@dataclass(frozen=True)
class ContactValidationError:
    """Contact validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ListContactsInput:
    """Input for listing contacts. query=None means unfiltered."""

    query: str | None = None


@dataclass(frozen=True)
class GetContactInput:
    contact_id: str


@dataclass(frozen=True)
class UpdateContactInput:
    """Input for updating a contact from the edit form."""

    contact_id: str
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class DeleteContactInput:
    contact_id: str


@dataclass(frozen=True)
class SetFavoriteInput:
    contact_id: str
    favorite: bool


# --- Output Models ---


@dataclass(frozen=True)
class ContactListOutput:
    """Loader payload: the filtered list and the query it was filtered by."""

    contacts: tuple[Contact, ...]
    query: str | None
    total: int


@dataclass(frozen=True)
class ContactOperationOutput:
    """Output from a contact operation."""

    contact: Contact | None
    errors: tuple[ContactValidationError, ...]
    success: bool


@dataclass(frozen=True)
class ContactOutput:
    """A single contact that is known to exist."""

    contact: Contact
