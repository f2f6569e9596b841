"""Tasklists: named groups of tasks inside a project.

Reads are v3. Create and update go through the legacy ``todo-list`` endpoints;
update is a ``POST`` to ``/projects/tasklists/{id}.json``, which is what the
API accepts for that path.
"""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Tasklist(Model):
    id: int = 0
    name: str = ""
    description: str = ""

    project: Relationship = Field(default_factory=Relationship)
    milestone: Optional[Relationship] = None

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    status: str = ""
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/tasklists/{self.id}"


class _SingleResponse(Model):
    tasklist: Tasklist


class Single(Model):
    id: int = 0
    tasklist: Optional[Tasklist] = None

    def build_request(self, server: str) -> httpx.Request:
        tasklist_id = require_id(self.id, "tasklist")
        return new_request("GET", f"{server}/projects/api/v3/tasklists/{tasklist_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.tasklist = _SingleResponse.model_validate_json(body).tasklist

    def populate_web_link(self, server: str) -> None:
        if self.tasklist is not None:
            self.tasklist.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    tasklists: List[Tasklist] = Field(default_factory=list)


class Multiple(Model):
    """List tasklists, optionally scoped to a project."""
    project_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/tasklists.json"
        else:
            url = f"{server}/projects/api/v3/tasklists.json"
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for tasklist in self.response.tasklists:
            tasklist.populate_web_link(server)


class Create(Model):
    """Create a tasklist. The server answers with ``{"tasklistId": "<id>"}``."""
    name: str = ""
    description: Optional[str] = None
    project_id: int = Field(0, exclude=True)
    milestone_id: Optional[int] = Field(None, alias="milestone-Id")

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.project_id, "project")
        return new_request("POST", f"{server}/projects/{project_id}/tasklists.json", body=envelope("todo-list", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = Field(None, alias="projectId")
    milestone_id: Optional[int] = Field(None, alias="milestone-Id")

    def build_request(self, server: str) -> httpx.Request:
        tasklist_id = require_id(self.id, "tasklist")
        return new_request("POST", f"{server}/projects/tasklists/{tasklist_id}.json", body=envelope("todo-list", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        tasklist_id = require_id(self.id, "tasklist")
        return new_request("DELETE", f"{server}/projects/api/v3/tasklists/{tasklist_id}.json")
