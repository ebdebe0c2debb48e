"""
Integration tests for the contact detail, edit, favorite and destroy routes.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from contacts_app.adapters.memory import InMemoryContactRepo
from contacts_app.api.deps import get_contact_repo, get_rules
from contacts_app.api.main import app
from contacts_app.rules.models import Rules


@pytest.fixture
def client(memory_repo: InMemoryContactRepo, rules: Rules) -> Iterator[TestClient]:
    app.dependency_overrides[get_contact_repo] = lambda: memory_repo
    app.dependency_overrides[get_rules] = lambda: rules
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestDetail:
    def test_detail_in_layout(self, client: TestClient) -> None:
        response = client.get("/contacts/ana1")
        assert response.status_code == 200
        html = response.text
        assert '<div id="contact">' in html
        assert '<a href="/contacts/ana1" class="active">' in html
        assert html.count("<li>") == 4

    def test_detail_keeps_sidebar_query(self, client: TestClient) -> None:
        html = client.get("/contacts/han1?query=sato").text
        assert html.count("<li>") == 1
        assert 'value="sato"' in html

    def test_unknown_contact_404(self, client: TestClient) -> None:
        response = client.get("/contacts/missing")
        assert response.status_code == 404
        assert "Not Found" in response.text

    def test_json(self, client: TestClient) -> None:
        body = client.get("/api/contacts/bru1").json()
        assert body["first"] == "Bruno"
        assert body["favorite"] is False


class TestEdit:
    def test_form_prefilled(self, client: TestClient) -> None:
        html = client.get("/contacts/bru1/edit").text
        assert 'value="Bruno"' in html
        assert 'value="Okafor"' in html

    def test_update_redirects_to_detail(
        self, client: TestClient, memory_repo: InMemoryContactRepo
    ) -> None:
        response = client.post(
            "/contacts/noname/edit",
            data={"first": "Ivan", "last": "Petrov", "twitter": "@ivan", "notes": ""},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/contacts/noname"

        contact = memory_repo.get_by_id("noname")
        assert contact is not None
        assert contact.first == "Ivan"
        assert contact.twitter == "@ivan"
        assert contact.notes is None

    def test_invalid_update_rerenders_with_errors(
        self, client: TestClient, memory_repo: InMemoryContactRepo
    ) -> None:
        response = client.post(
            "/contacts/bru1/edit",
            data={"first": "Bruno", "avatar": "javascript:alert(1)"},
            follow_redirects=False,
        )
        assert response.status_code == 400
        assert 'data-field="avatar"' in response.text
        assert memory_repo.get_by_id("bru1").avatar is None  # type: ignore[union-attr]

    def test_update_missing_contact(self, client: TestClient) -> None:
        response = client.post("/contacts/missing/edit", data={"first": "x"})
        assert response.status_code == 404


class TestFavoriteAndDestroy:
    def test_favorite_toggle(self, client: TestClient, memory_repo: InMemoryContactRepo) -> None:
        response = client.post(
            "/contacts/bru1/favorite", data={"favorite": "true"}, follow_redirects=False
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/contacts/bru1"
        assert memory_repo.get_by_id("bru1").favorite is True  # type: ignore[union-attr]

        client.post("/contacts/bru1/favorite", data={"favorite": "false"})
        assert memory_repo.get_by_id("bru1").favorite is False  # type: ignore[union-attr]

    def test_destroy(self, client: TestClient, memory_repo: InMemoryContactRepo) -> None:
        response = client.post("/contacts/han1/destroy", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert memory_repo.get_by_id("han1") is None

        html = client.get("/").text
        assert 'href="/contacts/han1"' not in html

    def test_destroy_missing(self, client: TestClient) -> None:
        assert client.post("/contacts/missing/destroy").status_code == 404
