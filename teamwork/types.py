"""Pydantic models shared across Teamwork.com entities."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from teamwork.scalars import LegacyNumber


class Model(BaseModel):
    """Base for wire models: fields accept either the Python name or the API alias."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ─── References ─────────────────────────────────────────────────

class Relationship(Model):
    """Sideloaded reference to another record, e.g. ``{"id": 5, "type": "users"}``."""
    id: int = 0
    type: str = ""
    meta: Optional[Dict[str, Any]] = None


class LegacyRelationship(Model):
    """Relationship from a legacy endpoint, where the ID arrives as a string."""
    id: LegacyNumber = LegacyNumber(0)
    type: str = ""
    meta: Optional[Dict[str, Any]] = None


class UserGroups(Model):
    """Users, companies and teams as the v3 endpoints expect them."""
    user_ids: List[int] = Field(default_factory=list, alias="userIds")
    company_ids: List[int] = Field(default_factory=list, alias="companyIds")
    team_ids: List[int] = Field(default_factory=list, alias="teamIds")

    def is_empty(self) -> bool:
        return not (self.user_ids or self.company_ids or self.team_ids)


# ─── Pagination ─────────────────────────────────────────────────

class Page(Model):
    has_more: bool = Field(False, alias="hasMore")


class PageMeta(Model):
    """``{"page": {"hasMore": bool}}`` as returned by list endpoints."""
    page: Page = Field(default_factory=Page)
