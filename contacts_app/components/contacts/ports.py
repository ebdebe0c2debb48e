"""
Contacts component - Port interfaces.
"""

from __future__ import annotations

from contacts_app.ports.repo import ContactRepoPort, RepositoryError

__all__ = ["ContactRepoPort", "RepositoryError"]
