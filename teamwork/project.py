"""Projects: the top-level container for tasklists, tasks, milestones and tags.

Listing and reading use the v3 API; create, update and delete use the legacy
endpoints with compact ``YYYYMMDD`` dates.
"""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import LegacyDate
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Project(Model):
    id: int = 0
    description: Optional[str] = None
    name: str = ""
    start_at: Optional[datetime] = Field(None, alias="startAt")
    end_at: Optional[datetime] = Field(None, alias="endAt")

    company: Relationship = Field(default_factory=Relationship)
    owner: Optional[Relationship] = Field(None, alias="projectOwner")
    tags: List[Relationship] = Field(default_factory=list)

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    created_by: Optional[int] = Field(None, alias="createdBy")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    updated_by: Optional[int] = Field(None, alias="updatedBy")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")
    completed_by: Optional[int] = Field(None, alias="completedBy")
    status: str = ""
    type: str = ""
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/projects/{self.id}"


class _SingleResponse(Model):
    project: Project


class Single(Model):
    """Retrieve one project by ID."""
    id: int = 0
    project: Optional[Project] = None

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.id, "project")
        return new_request("GET", f"{server}/projects/api/v3/projects/{project_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.project = _SingleResponse.model_validate_json(body).project

    def populate_web_link(self, server: str) -> None:
        if self.project is not None:
            self.project.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    tag_ids: List[int] = Field(default_factory=list)
    match_all_tags: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    projects: List[Project] = Field(default_factory=list)


class Multiple(Model):
    """List projects visible to the token's user."""
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        # Project tag filters carry their own parameter names.
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .ids("projectTagIds", self.filters.tag_ids)
            .flag("matchAllProjectTags", self.filters.match_all_tags)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", f"{server}/projects/api/v3/projects.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for project in self.response.projects:
            project.populate_web_link(server)


class Create(Model):
    """Create a project (legacy endpoint). The server answers with ``{"id": "<id>"}``."""
    name: str = ""
    description: Optional[str] = None
    start_at: Optional[LegacyDate] = Field(None, alias="start-date")
    end_at: Optional[LegacyDate] = Field(None, alias="end-date")
    company_id: Optional[int] = Field(None, alias="companyId")
    owner_id: Optional[int] = Field(None, alias="projectOwnerId")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/projects.json", body=envelope("project", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None
    start_at: Optional[LegacyDate] = Field(None, alias="start-date")
    end_at: Optional[LegacyDate] = Field(None, alias="end-date")
    company_id: Optional[int] = Field(None, alias="companyId")
    owner_id: Optional[int] = Field(None, alias="projectOwnerId")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.id, "project")
        return new_request("PUT", f"{server}/projects/{project_id}.json", body=envelope("project", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.id, "project")
        return new_request("DELETE", f"{server}/projects/{project_id}.json")
