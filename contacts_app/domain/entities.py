from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


def new_contact_id() -> str:
    return uuid4().hex[:12]


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- Contacts ---

class Contact(BaseModel):
    id: str = Field(default_factory=new_contact_id)
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def display_name(self) -> str:
        """'first last' trimmed; empty when neither name is set."""
        if not self.first and not self.last:
            return ""
        return f"{self.first or ''} {self.last or ''}".strip()
