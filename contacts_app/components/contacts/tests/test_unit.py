"""
Contacts component unit tests.

Tests for search filtering, ordering, creation and editing.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from contacts_app.components.contacts import (
    ContactNotFound,
    ContactOutput,
    ContactService,
    DataCreateFailure,
    DataFetchFailure,
    DataWriteFailure,
    DeleteContactInput,
    GetContactInput,
    ListContactsInput,
    RepositoryError,
    SetFavoriteInput,
    UpdateContactInput,
    filter_contacts,
    matches_query,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_set_favorite,
    run_update,
    sort_contacts,
)
from contacts_app.domain.entities import Contact
from contacts_app.rules.models import SearchRules

# --- Mock Repository ---


class MockContactRepo:
    """In-memory contact repository for testing."""

    def __init__(self) -> None:
        self._contacts: dict[str, Contact] = {}

    def save(self, contact: Contact) -> Contact:
        self._contacts[contact.id] = contact
        return contact

    def get_all(self) -> list[Contact]:
        return list(self._contacts.values())

    def get_by_id(self, contact_id: str) -> Contact | None:
        return self._contacts.get(contact_id)

    def delete(self, contact_id: str) -> None:
        self._contacts.pop(contact_id, None)


class BrokenContactRepo:
    """Repository whose every call fails."""

    def save(self, contact: Contact) -> Contact:
        raise RepositoryError("disk full")

    def get_all(self) -> list[Contact]:
        raise RepositoryError("database is locked")

    def get_by_id(self, contact_id: str) -> Contact | None:
        raise RepositoryError("database is locked")

    def delete(self, contact_id: str) -> None:
        raise RepositoryError("database is locked")


BASE = datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def repo() -> MockContactRepo:
    repo = MockContactRepo()
    repo.save(Contact(id="c1", first="Ana", last="Jovanovic", created_at=BASE))
    repo.save(Contact(id="c2", first="Chen", last="Liang", created_at=BASE + timedelta(seconds=1)))
    repo.save(Contact(id="c3", first="Mariana", last="Costa", created_at=BASE + timedelta(seconds=2)))
    return repo


@pytest.fixture
def service(repo: MockContactRepo) -> ContactService:
    return ContactService(repo=repo)


# --- Search Tests ---


class TestMatching:
    def test_case_insensitive_substring(self) -> None:
        contact = Contact(first="Mariana", last="Costa")
        assert matches_query(contact, "ANA")
        assert matches_query(contact, "cost")
        assert not matches_query(contact, "xyz")

    def test_case_sensitive(self) -> None:
        contact = Contact(first="Mariana")
        assert not matches_query(contact, "ANA", case_sensitive=True)
        assert matches_query(contact, "ana", case_sensitive=True)

    def test_missing_names_never_match(self) -> None:
        assert not matches_query(Contact(), "a")

    def test_filter_none_and_empty_return_all(self, repo: MockContactRepo) -> None:
        contacts = repo.get_all()
        assert filter_contacts(contacts, None) == contacts
        assert filter_contacts(contacts, "") == contacts

    def test_filter_uses_rule_fields(self) -> None:
        contacts = [Contact(first="A", twitter="@findme")]
        assert filter_contacts(contacts, "findme") == []
        rules = SearchRules(match_fields=["twitter"])
        assert filter_contacts(contacts, "findme", rules) == contacts


class TestSorting:
    def test_sorted_by_last_then_created(self) -> None:
        a = Contact(id="a", last="Smith", created_at=BASE + timedelta(seconds=5))
        b = Contact(id="b", last="Smith", created_at=BASE)
        c = Contact(id="c", last="adams", created_at=BASE)
        assert [x.id for x in sort_contacts([a, b, c])] == ["c", "b", "a"]

    def test_unnamed_sort_last(self) -> None:
        blank = Contact(id="blank", created_at=BASE)
        named = Contact(id="named", last="Zed", created_at=BASE + timedelta(seconds=1))
        assert [x.id for x in sort_contacts([blank, named])] == ["named", "blank"]


# --- Loader / Action Tests ---


def test_run_list_unfiltered(service: ContactService) -> None:
    result = run_list(ListContactsInput(query=None), service)
    assert result.query is None
    assert result.total == 3
    assert [c.id for c in result.contacts] == ["c3", "c1", "c2"]


def test_run_list_filtered(service: ContactService) -> None:
    result = run_list(ListContactsInput(query="ana"), service)
    assert result.query == "ana"
    assert [c.id for c in result.contacts] == ["c3", "c1"]


def test_run_list_empty_query_keeps_empty_string(service: ContactService) -> None:
    result = run_list(ListContactsInput(query=""), service)
    assert result.query == ""
    assert result.total == 3


def test_run_create_makes_blank_contact(service: ContactService, repo: MockContactRepo) -> None:
    result = run_create(service)
    assert result.contact.first is None and result.contact.last is None
    assert repo.get_by_id(result.contact.id) is not None


def test_run_create_ids_unique(service: ContactService) -> None:
    ids = {run_create(service).contact.id for _ in range(20)}
    assert len(ids) == 20


# --- Editing Tests ---


def test_run_get_missing_raises(service: ContactService) -> None:
    with pytest.raises(ContactNotFound):
        run_get(GetContactInput(contact_id="nope"), service)


def test_run_get_returns_existing_contact(service: ContactService) -> None:
    result = run_get(GetContactInput(contact_id="c2"), service)
    assert isinstance(result, ContactOutput)
    assert result.contact.first == "Chen"


def test_run_update_strips_and_blanks(service: ContactService) -> None:
    result = run_update(
        UpdateContactInput(contact_id="c1", first="  Anna ", last="", twitter="@anna"),
        service,
    )
    assert result.success
    assert result.contact is not None
    assert result.contact.first == "Anna"
    assert result.contact.last is None
    assert result.contact.twitter == "@anna"


def test_run_update_untouched_fields(service: ContactService) -> None:
    result = run_update(UpdateContactInput(contact_id="c2", notes="met at a conference"), service)
    assert result.contact is not None
    assert result.contact.first == "Chen"
    assert result.contact.notes == "met at a conference"


def test_run_update_validation(service: ContactService) -> None:
    result = run_update(
        UpdateContactInput(contact_id="c1", first="x" * 101, avatar="ftp://host/a.png"),
        service,
    )
    assert not result.success
    assert {e.code for e in result.errors} == {"first_too_long", "avatar_invalid_scheme"}


def test_set_favorite_and_delete(service: ContactService, repo: MockContactRepo) -> None:
    result = run_set_favorite(SetFavoriteInput(contact_id="c2", favorite=True), service)
    assert result.contact is not None and result.contact.favorite

    run_delete(DeleteContactInput(contact_id="c2"), service)
    assert repo.get_by_id("c2") is None

    with pytest.raises(ContactNotFound):
        run_delete(DeleteContactInput(contact_id="c2"), service)


# --- Failure propagation ---


def test_fetch_failure_propagates() -> None:
    service = ContactService(repo=BrokenContactRepo())
    with pytest.raises(DataFetchFailure) as exc_info:
        run_list(ListContactsInput(), service)
    assert isinstance(exc_info.value.__cause__, RepositoryError)


def test_create_failure_propagates() -> None:
    service = ContactService(repo=BrokenContactRepo())
    with pytest.raises(DataCreateFailure):
        run_create(service)


def test_write_failure_propagates(repo: MockContactRepo) -> None:
    class ReadOnlyRepo(MockContactRepo):
        def save(self, contact: Contact) -> Contact:
            raise RepositoryError("read-only")

    read_only = ReadOnlyRepo()
    read_only._contacts = dict(repo._contacts)
    service = ContactService(repo=read_only)
    with pytest.raises(DataWriteFailure):
        service.set_favorite("c1", True)
