"""Users (people): the individuals who can be assigned to work.

Reads are v3 under the ``person``/``people`` envelopes. Create, update and
delete use the legacy ``/people`` endpoints with dashed field names. The
module also covers the two membership operations that target people: adding
users to a project and (un)assigning users to a job role.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import Money
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id

USER_TYPES = ("account", "collaborator", "contact")


class User(Model):
    id: int = 0
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    title: Optional[str] = None
    email: str = ""
    admin: bool = Field(False, alias="isAdmin")
    type: str = ""
    cost: Optional[Money] = Field(None, alias="userCost")
    rate: Optional[Money] = Field(None, alias="userRate")

    company: Relationship = Field(default_factory=Relationship)
    job_roles: List[Relationship] = Field(default_factory=list, alias="jobRoles")
    skills: List[Relationship] = Field(default_factory=list)

    deleted: bool = False
    created_by: Optional[Relationship] = Field(None, alias="createdBy")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_by: Optional[Relationship] = Field(None, alias="updatedBy")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/people/{self.id}"


class _SingleResponse(Model):
    person: User


class Single(Model):
    id: int = 0
    user: Optional[User] = None

    def build_request(self, server: str) -> httpx.Request:
        user_id = require_id(self.id, "user")
        return new_request("GET", f"{server}/projects/api/v3/people/{user_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.user = _SingleResponse.model_validate_json(body).person

    def populate_web_link(self, server: str) -> None:
        if self.user is not None:
            self.user.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    type: str = ""
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    users: List[User] = Field(default_factory=list, alias="people")


class Multiple(Model):
    """List users, optionally only those in one project."""
    project_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/people.json"
        else:
            url = f"{server}/projects/api/v3/people.json"
        if self.filters.type and self.filters.type not in USER_TYPES:
            raise ValueError(f"invalid user type: {self.filters.type!r}")
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .text("userType", self.filters.type)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for user in self.response.users:
            user.populate_web_link(server)


class Create(Model):
    """Create a user. The server answers with ``{"id": "<id>"}``."""
    first_name: str = Field("", alias="first-name")
    last_name: str = Field("", alias="last-name")
    title: Optional[str] = None
    email: str = Field("", alias="email-address")
    admin: Optional[bool] = Field(None, alias="administrator")
    type: Optional[str] = Field(None, alias="user-type")
    company_id: Optional[int] = Field(None, alias="company-id")

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/people.json", body=envelope("person", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    first_name: Optional[str] = Field(None, alias="first-name")
    last_name: Optional[str] = Field(None, alias="last-name")
    title: Optional[str] = None
    email: Optional[str] = Field(None, alias="email-address")
    password: Optional[str] = None
    admin: Optional[bool] = Field(None, alias="administrator")
    type: Optional[str] = Field(None, alias="user-type")
    company_id: Optional[int] = Field(None, alias="company-id")

    def build_request(self, server: str) -> httpx.Request:
        user_id = require_id(self.id, "user")
        return new_request("PUT", f"{server}/people/{user_id}.json", body=envelope("person", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        user_id = require_id(self.id, "user")
        return new_request("DELETE", f"{server}/people/{user_id}.json")


# ─── Memberships ────────────────────────────────────────────────

class ProjectAdd(Model):
    """Add users to a project: ``PUT`` with a bare ``{"userIds": [...]}`` body."""
    project_id: int = Field(0, exclude=True)
    user_ids: List[int] = Field(default_factory=list, alias="userIds")

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.project_id, "project")
        return new_request(
            "PUT",
            f"{server}/projects/api/v3/projects/{project_id}/people.json",
            body={"userIds": list(self.user_ids)},
        )


class JobRoleAssign(Model):
    """Assign users to a job role, optionally as its primary holders."""
    job_role_id: int = Field(0, exclude=True)
    user_ids: List[int] = Field(default_factory=list, alias="users")
    is_primary: bool = Field(False, alias="isPrimary")

    method: ClassVar[str] = "POST"

    def build_request(self, server: str) -> httpx.Request:
        job_role_id = require_id(self.job_role_id, "job role")
        return new_request(
            self.method,
            f"{server}/projects/api/v3/jobroles/{job_role_id}/people.json",
            body={"users": list(self.user_ids), "isPrimary": self.is_primary},
        )


class JobRoleUnassign(JobRoleAssign):
    """Remove users from a job role. Same shape as the assignment, sent as ``DELETE``."""

    method: ClassVar[str] = "DELETE"
