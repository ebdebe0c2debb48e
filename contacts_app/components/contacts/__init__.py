"""
Contacts component - Contact storage access, search and editing.
"""

from ._impl import (
    ContactService,
    filter_contacts,
    matches_query,
    sort_contacts,
    validate_contact_data,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_set_favorite,
    run_update,
)
from .models import (
    ContactDataError,
    ContactListOutput,
    ContactNotFound,
    ContactOperationOutput,
    ContactOutput,
    ContactValidationError,
    DataCreateFailure,
    DataFetchFailure,
    DataWriteFailure,
    DeleteContactInput,
    GetContactInput,
    ListContactsInput,
    SetFavoriteInput,
    UpdateContactInput,
)
from .ports import ContactRepoPort, RepositoryError

__all__ = [
    # Entry points
    "run_list",
    "run_create",
    "run_get",
    "run_update",
    "run_set_favorite",
    "run_delete",
    # Input models
    "ListContactsInput",
    "GetContactInput",
    "UpdateContactInput",
    "SetFavoriteInput",
    "DeleteContactInput",
    # Output models
    "ContactListOutput",
    "ContactOperationOutput",
    "ContactOutput",
    "ContactValidationError",
    # Errors
    "ContactDataError",
    "DataFetchFailure",
    "DataCreateFailure",
    "DataWriteFailure",
    "ContactNotFound",
    # Ports
    "ContactRepoPort",
    "RepositoryError",
    # Core
    "ContactService",
    "filter_contacts",
    "matches_query",
    "sort_contacts",
    "validate_contact_data",
]
