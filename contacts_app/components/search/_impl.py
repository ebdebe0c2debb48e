"""
Search-as-you-type state machine for the root layout.

Functional Core. The URL query string is the only source of truth for
the search query; everything else here is derived from it or from the
router's navigation state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import parse_qs, urlencode

from .models import (
    IDLE,
    Location,
    NavigationPhase,
    NavigationState,
    SearchViewState,
    SubmitOptions,
)

logger = logging.getLogger(__name__)

DEFAULT_PARAM = "query"


# --- URL state ---


def get_query(search: str, param: str = DEFAULT_PARAM) -> str | None:
    """
    Read param from a query string.

    Absent gives None; present but empty gives "". The two are kept
    distinct because the first-search rule depends on it.
    """
    values = parse_qs(search.lstrip("?"), keep_blank_values=True).get(param)
    if not values:
        return None
    return values[0]


def has_param(search: str, param: str = DEFAULT_PARAM) -> bool:
    return get_query(search, param) is not None


def serialize_form(fields: Mapping[str, str]) -> str:
    """Form values as a query string, the way a GET form submits them."""
    if not fields:
        return ""
    return "?" + urlencode(list(fields.items()))


# --- Transition rules ---


def is_first_search(query: str | None) -> bool:
    """
    True when the currently loaded page had no query at all.

    Evaluated against the rendered query, never the in-flight target.
    An empty query ("") is not a first search.
    """
    return query is None


def submit_options(query: str | None) -> SubmitOptions:
    """First search pushes a history entry; later keystrokes replace it."""
    return SubmitOptions(replace=not is_first_search(query))


def is_searching(navigation: NavigationState, param: str = DEFAULT_PARAM) -> bool:
    return navigation.location is not None and has_param(navigation.location.search, param)


def is_search_loading(navigation: NavigationState, param: str = DEFAULT_PARAM) -> bool:
    return navigation.state == "loading" and is_searching(navigation, param)


def search_field_value(query: str | None) -> str:
    return query or ""


def derive_view_state(
    query: str | None,
    navigation: NavigationState = IDLE,
    param: str = DEFAULT_PARAM,
) -> SearchViewState:
    searching = is_searching(navigation, param)
    loading = is_search_loading(navigation, param)
    return SearchViewState(
        query=query,
        field_value=search_field_value(query),
        is_first_search=is_first_search(query),
        is_searching=searching,
        search_loading=loading,
        detail_loading=loading,
    )


# --- History ---


class NavigationHistory:
    """
    Browser-style session history.

    push() drops any forward entries; replace() overwrites the current
    entry in place.
    """

    def __init__(self, initial: Location | None = None) -> None:
        self._entries: list[Location] = [initial or Location()]
        self._index = 0

    @property
    def current(self) -> Location:
        return self._entries[self._index]

    @property
    def entries(self) -> tuple[Location, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, location: Location) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(location)
        self._index += 1

    def replace(self, location: Location) -> None:
        self._entries[self._index] = location

    def navigate(self, location: Location, options: SubmitOptions) -> None:
        if options.replace:
            self.replace(location)
        else:
            self.push(location)

    def back(self) -> Location:
        if self._index > 0:
            self._index -= 1
        return self.current

    def forward(self) -> Location:
        if self._index < len(self._entries) - 1:
            self._index += 1
        return self.current


# --- In-flight navigation tracking ---


class NavigationController:
    """
    Tracks the single current navigation.

    Each begin() supersedes whatever was in flight. complete() only
    commits for the latest token, so a slow stale load can never
    overwrite a newer result.
    """

    def __init__(self) -> None:
        self._latest = 0
        self.navigation: NavigationState = IDLE

    def begin(self, location: Location, state: NavigationPhase = "loading") -> int:
        self._latest += 1
        self.navigation = NavigationState(state=state, location=location)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def complete(self, token: int) -> bool:
        """Mark a navigation finished. Returns False if it was superseded."""
        if not self.is_current(token):
            logger.debug("Dropping stale navigation %d (latest %d)", token, self._latest)
            return False
        self.navigation = IDLE
        return True
