"""
Root route loader and action.

The loader reads the search query from the request URL and asks the
contact service for the matching list; the action creates a blank
contact and names the page to redirect to. Data-layer errors propagate
out of both unchanged.
"""

import logging

from contacts_app.components.contacts import (
    ContactListOutput,
    ContactService,
    ListContactsInput,
    run_create,
    run_list,
)
from contacts_app.components.search import DEFAULT_PARAM, Location, get_query

logger = logging.getLogger(__name__)

DEFAULT_EDIT_PATH = "/contacts/{id}/edit"


def root_loader(url: str, service: ContactService, param: str = DEFAULT_PARAM) -> ContactListOutput:
    query = get_query(Location.from_url(url).search, param)
    result = run_list(ListContactsInput(query=query), service)
    logger.debug("root loader query=%r -> %d contacts", query, result.total)
    return result


def root_action(service: ContactService, edit_path: str = DEFAULT_EDIT_PATH) -> str:
    """Create an empty contact and return the path of its edit page."""
    contact = run_create(service).contact
    return edit_path.format(id=contact.id)
