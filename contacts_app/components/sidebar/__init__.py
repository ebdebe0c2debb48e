"""
Sidebar component - Server-side HTML for the root layout and its outlets.
"""

from ._impl import (
    DEFAULT_TITLE,
    SEARCH_SCRIPT,
    contact_path,
    link_state,
    render_contact_detail,
    render_contact_form,
    render_contact_label,
    render_contact_list,
    render_error_page,
    render_index,
    render_new_form,
    render_root_layout,
    render_search_form,
)

__all__ = [
    "DEFAULT_TITLE",
    "SEARCH_SCRIPT",
    "contact_path",
    "link_state",
    "render_contact_detail",
    "render_contact_form",
    "render_contact_label",
    "render_contact_list",
    "render_error_page",
    "render_index",
    "render_new_form",
    "render_root_layout",
    "render_search_form",
]
