from datetime import datetime

from pydantic import BaseModel

from contacts_app.domain.entities import Contact


# --- Contacts ---
class ContactResponse(BaseModel):
    id: str
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool = False
    created_at: datetime

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        return cls.model_validate(contact.model_dump())


# --- Root loader payload ---
class RootDataResponse(BaseModel):
    contacts: list[ContactResponse]
    query: str | None
