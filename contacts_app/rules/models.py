from typing import Literal

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    title: str
    rules_version: str


class SearchRules(BaseModel):
    param: str = "query"
    match_fields: list[Literal["first", "last", "twitter", "notes"]] = Field(
        default_factory=lambda: ["first", "last"]
    )
    case_sensitive: bool = False


class FieldLimit(BaseModel):
    max: int


class ContactRules(BaseModel):
    sort_by: list[Literal["last", "first", "created_at"]] = Field(
        default_factory=lambda: ["last", "created_at"]
    )
    first: FieldLimit = FieldLimit(max=100)
    last: FieldLimit = FieldLimit(max=100)
    twitter: FieldLimit = FieldLimit(max=50)
    avatar: FieldLimit = FieldLimit(max=2048)
    notes: FieldLimit = FieldLimit(max=5000)
    allowed_avatar_protocols: list[str] = Field(default_factory=lambda: ["http", "https"])


class NavigationRules(BaseModel):
    redirect_status: Literal[301, 302, 303, 307, 308] = 303
    edit_path: str = "/contacts/{id}/edit"


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)
    seed_if_empty: bool = False


class Rules(BaseModel):
    project: ProjectRules
    search: SearchRules = SearchRules()
    contacts: ContactRules = ContactRules()
    navigation: NavigationRules = NavigationRules()
    ops: OpsRules = OpsRules()
