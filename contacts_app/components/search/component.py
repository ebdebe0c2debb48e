"""
Search component - Shell layer.

SearchSession drives the full type -> navigate -> load -> render cycle
of the root layout against a loader callable. The loader is the only
I/O; history and in-flight tracking come from the functional core.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from ._impl import (
    DEFAULT_PARAM,
    NavigationController,
    NavigationHistory,
    derive_view_state,
    serialize_form,
    submit_options,
)
from .models import Location, SearchViewState

logger = logging.getLogger(__name__)


class LoadedPage(Protocol):
    @property
    def query(self) -> str | None: ...


PageT = TypeVar("PageT", bound=LoadedPage)


@dataclass(frozen=True)
class PendingNavigation:
    """A navigation that has been issued but not yet resolved."""

    token: int
    location: Location
    replace: bool


class SearchSession(Generic[PageT]):
    """
    One browser tab looking at the root layout.

    The loaded page (and so the rendered query) only changes when the
    latest navigation resolves.
    """

    def __init__(
        self,
        loader: Callable[[Location], PageT],
        initial: Location | None = None,
        param: str = DEFAULT_PARAM,
    ) -> None:
        self._loader = loader
        self._param = param
        self.history = NavigationHistory(initial or Location())
        self.controller = NavigationController()
        self.page: PageT = loader(self.history.current)

    @property
    def query(self) -> str | None:
        return self.page.query

    def view_state(self) -> SearchViewState:
        return derive_view_state(self.query, self.controller.navigation, self._param)

    def change(self, fields: Mapping[str, str], action: str = "/") -> PendingNavigation:
        """Search form change event: submit the form as a GET navigation."""
        options = submit_options(self.query)
        target = Location(action, serialize_form(fields))
        self.history.navigate(target, options)
        token = self.controller.begin(target)
        logger.debug("search navigation %d -> %s (replace=%s)", token, target.href, options.replace)
        return PendingNavigation(token=token, location=target, replace=options.replace)

    def resolve(self, pending: PendingNavigation) -> bool:
        """
        Run the loader for a pending navigation.

        Returns False, leaving the page untouched, if a newer navigation
        started in the meantime.
        """
        page = self._loader(pending.location)
        if not self.controller.complete(pending.token):
            return False
        self.page = page
        return True

    def type(self, value: str) -> PendingNavigation:
        """Type into the search field and let the navigation finish."""
        pending = self.change({self._param: value})
        self.resolve(pending)
        return pending

    def go(self, location: Location) -> PendingNavigation:
        """Plain link navigation: always pushes."""
        self.history.push(location)
        pending = PendingNavigation(
            token=self.controller.begin(location), location=location, replace=False
        )
        self.resolve(pending)
        return pending

    def back(self) -> Location:
        location = self.history.back()
        self._reload(location)
        return location

    def forward(self) -> Location:
        location = self.history.forward()
        self._reload(location)
        return location

    def _reload(self, location: Location) -> None:
        pending = PendingNavigation(
            token=self.controller.begin(location), location=location, replace=False
        )
        self.resolve(pending)
