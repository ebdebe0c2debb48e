"""
Search component - Data models.

Navigation state as seen by the root layout, and the per-render view
state derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlsplit

NavigationPhase = Literal["idle", "loading", "submitting"]
LinkState = Literal["active", "pending", ""]


@dataclass(frozen=True)
class Location:
    """A path plus its query string ("" or "?a=b")."""

    pathname: str = "/"
    search: str = ""

    @classmethod
    def from_url(cls, url: str) -> Location:
        parts = urlsplit(url)
        return cls(
            pathname=parts.path or "/",
            search=f"?{parts.query}" if parts.query else "",
        )

    @property
    def href(self) -> str:
        return f"{self.pathname}{self.search}"


@dataclass(frozen=True)
class NavigationState:
    """Router phase plus the in-flight target, if any."""

    state: NavigationPhase = "idle"
    location: Location | None = None


IDLE = NavigationState()


@dataclass(frozen=True)
class SubmitOptions:
    """How a search-form submission touches the history stack."""

    replace: bool


@dataclass(frozen=True)
class SearchViewState:
    """Everything the view needs from the search state machine for one render."""

    query: str | None
    field_value: str
    is_first_search: bool
    is_searching: bool
    search_loading: bool
    detail_loading: bool

    @property
    def replace_on_change(self) -> bool:
        return not self.is_first_search
