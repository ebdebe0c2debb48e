"""
Contacts component - Shell layer entry points.

Thin run_* wrappers that turn service calls into output records.
Data-layer failures are not caught here; they propagate to the caller.
"""

from __future__ import annotations

from ._impl import ContactService
from .models import (
    ContactListOutput,
    ContactOperationOutput,
    ContactOutput,
    DeleteContactInput,
    GetContactInput,
    ListContactsInput,
    SetFavoriteInput,
    UpdateContactInput,
)


def run_list(input_data: ListContactsInput, service: ContactService) -> ContactListOutput:
    """Root loader: fetch the contacts filtered by the current query."""
    contacts = service.get_contacts(input_data.query)
    return ContactListOutput(
        contacts=tuple(contacts),
        query=input_data.query,
        total=len(contacts),
    )


def run_create(service: ContactService) -> ContactOutput:
    """Root action: create an empty contact. Submitted fields are ignored."""
    return ContactOutput(contact=service.create_empty_contact())


def run_get(input_data: GetContactInput, service: ContactService) -> ContactOutput:
    """Fetch one contact. Raises ContactNotFound when it does not exist."""
    return ContactOutput(contact=service.get_contact(input_data.contact_id))


def run_update(input_data: UpdateContactInput, service: ContactService) -> ContactOperationOutput:
    """Update a contact. Fields left as None are not touched."""
    updates: dict[str, str | None] = {}
    for field in ("first", "last", "avatar", "twitter", "notes"):
        value = getattr(input_data, field)
        if value is not None:
            updates[field] = value

    contact, errors = service.update_contact(input_data.contact_id, updates)
    return ContactOperationOutput(
        contact=contact,
        errors=tuple(errors),
        success=contact is not None,
    )


def run_set_favorite(input_data: SetFavoriteInput, service: ContactService) -> ContactOperationOutput:
    contact = service.set_favorite(input_data.contact_id, input_data.favorite)
    return ContactOperationOutput(contact=contact, errors=(), success=True)


def run_delete(input_data: DeleteContactInput, service: ContactService) -> ContactOperationOutput:
    service.delete_contact(input_data.contact_id)
    return ContactOperationOutput(contact=None, errors=(), success=True)
