"""Skills: knowledge or abilities assigned to users."""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Skill(Model):
    id: int = 0
    name: str = ""
    users: List[Relationship] = Field(default_factory=list)

    created_by: int = Field(0, alias="createdByUser")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_by: Optional[int] = Field(None, alias="updatedByUser")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_by: Optional[int] = Field(None, alias="deletedByUser")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")


class _SingleResponse(Model):
    skill: Skill


class Single(Model):
    id: int = 0
    skill: Optional[Skill] = None

    def build_request(self, server: str) -> httpx.Request:
        skill_id = require_id(self.id, "skill")
        return new_request("GET", f"{server}/projects/api/v3/skills/{skill_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.skill = _SingleResponse.model_validate_json(body).skill


class Filters(Model):
    search_term: str = ""
    page: int = 0
    page_size: int = 0
    include: List[str] = Field(default_factory=list)


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    skills: List[Skill] = Field(default_factory=list)


class Multiple(Model):
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
            .words("include", self.filters.include)
        )
        return new_request("GET", f"{server}/projects/api/v3/skills.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)


class Create(Model):
    name: str = ""
    user_ids: List[int] = Field(default_factory=list, alias="userIds")

    def build_request(self, server: str) -> httpx.Request:
        body = envelope("skill", self)
        # The API wants the member list even when it is empty.
        body["skill"].setdefault("userIds", [])
        return new_request("POST", f"{server}/projects/api/v3/skills.json", body=body)


class Update(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    user_ids: List[int] = Field(default_factory=list, alias="userIds")

    def build_request(self, server: str) -> httpx.Request:
        skill_id = require_id(self.id, "skill")
        return new_request("PATCH", f"{server}/projects/api/v3/skills/{skill_id}.json", body=envelope("skill", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        skill_id = require_id(self.id, "skill")
        return new_request("DELETE", f"{server}/projects/api/v3/skills/{skill_id}.json")
