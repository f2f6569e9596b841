"""Milestones: dated checkpoints inside a project.

Reads go through the v3 API. Create, update and delete still use the legacy
endpoints, which want a compact ``YYYYMMDD`` deadline and the packed
user/company/team assignee string.
"""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import LegacyDate, LegacyUserGroups
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Milestone(Model):
    id: int = 0
    name: str = ""
    description: str = ""
    due_date: Optional[datetime] = Field(None, alias="deadline")

    project: Relationship = Field(default_factory=Relationship)
    tasklists: List[Relationship] = Field(default_factory=list)
    tags: List[Relationship] = Field(default_factory=list)
    responsible_parties: List[Relationship] = Field(default_factory=list, alias="responsibleParties")

    created_at: Optional[datetime] = Field(None, alias="createdOn")
    updated_at: Optional[datetime] = Field(None, alias="lastChangedOn")
    deleted_at: Optional[datetime] = Field(None, alias="deletedOn")
    completed_at: Optional[datetime] = Field(None, alias="completedOn")
    completed_by: Optional[int] = Field(None, alias="completedBy")
    completed: bool = False
    status: str = ""
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/milestones/{self.id}"


class _SingleResponse(Model):
    milestone: Milestone


class Single(Model):
    """Retrieve one milestone by ID."""
    id: int = 0
    milestone: Optional[Milestone] = None

    def build_request(self, server: str) -> httpx.Request:
        milestone_id = require_id(self.id, "milestone")
        return new_request("GET", f"{server}/projects/api/v3/milestones/{milestone_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.milestone = _SingleResponse.model_validate_json(body).milestone

    def populate_web_link(self, server: str) -> None:
        if self.milestone is not None:
            self.milestone.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    tag_ids: List[int] = Field(default_factory=list)
    match_all_tags: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    milestones: List[Milestone] = Field(default_factory=list)


class Multiple(Model):
    """List milestones, optionally scoped to a project."""
    project_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/milestones.json"
        else:
            url = f"{server}/projects/api/v3/milestones.json"
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .ids("tagIds", self.filters.tag_ids)
            .flag("matchAllTags", self.filters.match_all_tags)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for milestone in self.response.milestones:
            milestone.populate_web_link(server)


class Create(Model):
    """Create a milestone in a project (legacy endpoint).

    At least one assignee is required. The server answers with
    ``{"milestoneId": "<id>"}``.
    """
    project_id: int = Field(0, exclude=True)
    name: str = Field("", alias="title")
    description: Optional[str] = None
    due_date: Optional[LegacyDate] = Field(None, alias="deadline")
    tasklist_ids: List[int] = Field(default_factory=list, alias="tasklistIds")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")
    assignees: LegacyUserGroups = Field(default_factory=LegacyUserGroups, alias="responsible-party-ids")

    def build_request(self, server: str) -> httpx.Request:
        project_id = require_id(self.project_id, "project")
        if self.due_date is None:
            raise ValueError("missing milestone due date")
        if self.assignees.is_empty():
            raise ValueError("at least one assignee must be provided")
        return new_request(
            "POST",
            f"{server}/projects/{project_id}/milestones.json",
            body=envelope("milestone", self),
        )


class Update(Model):
    """Update a milestone (legacy endpoint). Unset fields are left untouched."""
    id: int = Field(0, exclude=True)
    name: Optional[str] = Field(None, alias="title")
    description: Optional[str] = None
    due_date: Optional[LegacyDate] = Field(None, alias="deadline")
    tasklist_ids: List[int] = Field(default_factory=list, alias="tasklistIds")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")
    assignees: Optional[LegacyUserGroups] = Field(None, alias="responsible-party-ids")

    def build_request(self, server: str) -> httpx.Request:
        milestone_id = require_id(self.id, "milestone")
        return new_request("PUT", f"{server}/milestones/{milestone_id}.json", body=envelope("milestone", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        milestone_id = require_id(self.id, "milestone")
        return new_request("DELETE", f"{server}/milestones/{milestone_id}.json")
