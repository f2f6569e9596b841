"""Job roles: roles that can be assigned to users.

The API reads the create body from a ``jobRole`` envelope and the update body
from ``jobrole``; both are reproduced as-is.
"""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class JobRole(Model):
    id: int = 0
    name: str = ""
    users: List[Relationship] = Field(default_factory=list)
    primary_users: List[Relationship] = Field(default_factory=list, alias="primaryUsers")

    created_by: int = Field(0, alias="createdByUser")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_by: Optional[int] = Field(None, alias="updatedByUser")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_by: Optional[int] = Field(None, alias="deletedByUser")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")
    active: bool = Field(False, alias="isActive")
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/people/roles"


class _SingleResponse(Model):
    job_role: JobRole = Field(alias="jobRole")


class Single(Model):
    id: int = 0
    job_role: Optional[JobRole] = None

    def build_request(self, server: str) -> httpx.Request:
        job_role_id = require_id(self.id, "job role")
        return new_request("GET", f"{server}/projects/api/v3/jobroles/{job_role_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.job_role = _SingleResponse.model_validate_json(body).job_role

    def populate_web_link(self, server: str) -> None:
        if self.job_role is not None:
            self.job_role.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    page: int = 0
    page_size: int = 0
    include: List[str] = Field(default_factory=list)


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    job_roles: List[JobRole] = Field(default_factory=list, alias="jobRoles")


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
        return new_request("GET", f"{server}/projects/api/v3/jobroles.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for job_role in self.response.job_roles:
            job_role.populate_web_link(server)


class Create(Model):
    name: str = ""

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/projects/api/v3/jobroles.json", body=envelope("jobRole", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    name: str = ""

    def build_request(self, server: str) -> httpx.Request:
        job_role_id = require_id(self.id, "job role")
        return new_request(
            "PATCH",
            f"{server}/projects/api/v3/jobroles/{job_role_id}.json",
            body=envelope("jobrole", self),
        )


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        job_role_id = require_id(self.id, "job role")
        return new_request("DELETE", f"{server}/projects/api/v3/jobroles/{job_role_id}.json")
