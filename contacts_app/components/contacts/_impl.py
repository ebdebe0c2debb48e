"""
ContactService - contact lookup, search and editing.

Functional Core - business logic over a ContactRepoPort. Repository
failures are re-raised as ContactDataError subclasses; nothing here
retries or falls back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from contacts_app.domain.entities import Contact
from contacts_app.rules.models import ContactRules, SearchRules

from .models import (
    ContactNotFound,
    ContactValidationError,
    DataCreateFailure,
    DataFetchFailure,
    DataWriteFailure,
)
from .ports import ContactRepoPort, RepositoryError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("first", "last", "avatar", "twitter", "notes")


# --- Search ---


def matches_query(
    contact: Contact,
    query: str,
    fields: Iterable[str] = ("first", "last"),
    case_sensitive: bool = False,
) -> bool:
    """True if any of the given fields contains query as a substring."""
    needle = query if case_sensitive else query.lower()
    for field in fields:
        value = getattr(contact, field) or ""
        if not case_sensitive:
            value = value.lower()
        if needle in value:
            return True
    return False


def sort_contacts(contacts: Iterable[Contact], keys: Iterable[str] = ("last", "created_at")) -> list[Contact]:
    keys = tuple(keys)

    def sort_key(contact: Contact) -> tuple[Any, ...]:
        parts: list[Any] = []
        for key in keys:
            value = getattr(contact, key)
            if isinstance(value, datetime):
                parts.append(value)
            else:
                # Missing names sort last
                parts.append((value is None or value == "", (value or "").lower()))
        return tuple(parts)

    return sorted(contacts, key=sort_key)


def filter_contacts(
    contacts: Iterable[Contact],
    query: str | None,
    search_rules: SearchRules | None = None,
) -> list[Contact]:
    """Apply the search predicate. None and "" both mean no filtering."""
    if not query:
        return list(contacts)
    rules = search_rules or SearchRules()
    return [
        c
        for c in contacts
        if matches_query(c, query, rules.match_fields, rules.case_sensitive)
    ]


# --- Validation ---


def validate_contact_data(
    updates: dict[str, str | None],
    rules: ContactRules | None = None,
) -> list[ContactValidationError]:
    rules = rules or ContactRules()
    errors: list[ContactValidationError] = []

    for field in EDITABLE_FIELDS:
        value = updates.get(field)
        if value is None:
            continue
        limit = getattr(rules, field).max
        if len(value) > limit:
            errors.append(
                ContactValidationError(
                    code=f"{field}_too_long",
                    message=f"{field.capitalize()} must be {limit} characters or less",
                    field=field,
                )
            )

    avatar = updates.get("avatar")
    if avatar:
        scheme = urlparse(avatar).scheme
        if scheme not in rules.allowed_avatar_protocols:
            errors.append(
                ContactValidationError(
                    code="avatar_invalid_scheme",
                    message="Avatar URL must start with "
                    + " or ".join(f"{p}://" for p in rules.allowed_avatar_protocols),
                    field="avatar",
                )
            )

    return errors


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


# --- Contact Service ---


class ContactService:
    """
    Contact service.

    The data collaborator behind the root loader and action, and behind
    the contact detail/edit routes.
    """

    def __init__(
        self,
        repo: ContactRepoPort,
        contact_rules: ContactRules | None = None,
        search_rules: SearchRules | None = None,
    ) -> None:
        self._repo = repo
        self._contact_rules = contact_rules or ContactRules()
        self._search_rules = search_rules or SearchRules()

    def get_contacts(self, query: str | None = None) -> list[Contact]:
        """
        Return contacts matching query, sorted for the sidebar.

        Raises:
            DataFetchFailure: the repository could not be read.
        """
        try:
            contacts = self._repo.get_all()
        except RepositoryError as e:
            raise DataFetchFailure(str(e)) from e

        matched = filter_contacts(contacts, query, self._search_rules)
        return sort_contacts(matched, self._contact_rules.sort_by)

    def create_empty_contact(self) -> Contact:
        """
        Create a blank contact with a fresh id.

        Raises:
            DataCreateFailure: the repository rejected the insert.
        """
        contact = Contact()
        try:
            saved = self._repo.save(contact)
        except RepositoryError as e:
            raise DataCreateFailure(str(e)) from e
        logger.info("Created empty contact %s", saved.id)
        return saved

    def get_contact(self, contact_id: str) -> Contact:
        try:
            contact = self._repo.get_by_id(contact_id)
        except RepositoryError as e:
            raise DataFetchFailure(str(e)) from e
        if contact is None:
            raise ContactNotFound(contact_id)
        return contact

    def update_contact(
        self,
        contact_id: str,
        updates: dict[str, str | None],
    ) -> tuple[Contact | None, list[ContactValidationError]]:
        """
        Apply edit-form values to a contact.

        Returns:
            Tuple of (contact, errors). Contact is None if validation fails.
        """
        contact = self.get_contact(contact_id)

        errors = validate_contact_data(updates, self._contact_rules)
        if errors:
            return None, errors

        for field in EDITABLE_FIELDS:
            if field in updates:
                setattr(contact, field, _clean(updates[field]))

        return self._write(contact), []

    def set_favorite(self, contact_id: str, favorite: bool) -> Contact:
        contact = self.get_contact(contact_id)
        contact.favorite = favorite
        return self._write(contact)

    def delete_contact(self, contact_id: str) -> None:
        self.get_contact(contact_id)
        try:
            self._repo.delete(contact_id)
        except RepositoryError as e:
            raise DataWriteFailure(str(e)) from e
        logger.info("Deleted contact %s", contact_id)

    def _write(self, contact: Contact) -> Contact:
        try:
            return self._repo.save(contact)
        except RepositoryError as e:
            raise DataWriteFailure(str(e)) from e
