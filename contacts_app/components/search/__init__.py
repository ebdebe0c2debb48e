"""
Search component - URL-synchronized search-as-you-type state.
"""

from ._impl import (
    DEFAULT_PARAM,
    NavigationController,
    NavigationHistory,
    derive_view_state,
    get_query,
    has_param,
    is_first_search,
    is_search_loading,
    is_searching,
    search_field_value,
    serialize_form,
    submit_options,
)
from .component import LoadedPage, PendingNavigation, SearchSession
from .models import (
    IDLE,
    LinkState,
    Location,
    NavigationPhase,
    NavigationState,
    SearchViewState,
    SubmitOptions,
)

__all__ = [
    # Core
    "DEFAULT_PARAM",
    "get_query",
    "has_param",
    "serialize_form",
    "is_first_search",
    "submit_options",
    "is_searching",
    "is_search_loading",
    "search_field_value",
    "derive_view_state",
    "NavigationHistory",
    "NavigationController",
    # Shell
    "SearchSession",
    "PendingNavigation",
    "LoadedPage",
    # Models
    "IDLE",
    "LinkState",
    "Location",
    "NavigationPhase",
    "NavigationState",
    "SearchViewState",
    "SubmitOptions",
]
