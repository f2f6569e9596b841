"""Tasks: units of work inside a tasklist.

Every task endpoint is on the v3 API, so dates are ISO ``YYYY-MM-DD`` and
assignees travel as a ``UserGroups`` object.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import Date
from teamwork.types import Model, PageMeta, Relationship, UserGroups
from teamwork.wire import Query, envelope, new_request, require_id

PRIORITIES = ("low", "medium", "high")


class Task(Model):
    id: int = 0
    name: str = ""
    description: Optional[str] = None
    description_content_type: Optional[str] = Field(None, alias="descriptionContentType")
    priority: Optional[str] = None
    progress: int = 0
    start_at: Optional[datetime] = Field(None, alias="startDate")
    due_at: Optional[datetime] = Field(None, alias="dueDate")
    estimated_minutes: int = Field(0, alias="estimateMinutes")

    tasklist: Relationship = Field(default_factory=Relationship)
    assignees: List[Relationship] = Field(default_factory=list)
    tags: List[Relationship] = Field(default_factory=list)

    created_by: Optional[int] = Field(None, alias="createdBy")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_by: Optional[int] = Field(None, alias="updatedBy")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_by: Optional[int] = Field(None, alias="deletedBy")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")
    completed_by: Optional[int] = Field(None, alias="completedBy")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")
    status: str = ""
    meta: Optional[Dict[str, Any]] = None
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/tasks/{self.id}"


class _SingleResponse(Model):
    task: Task


class Single(Model):
    """Retrieve one task by ID."""
    id: int = 0
    task: Optional[Task] = None

    def build_request(self, server: str) -> httpx.Request:
        task_id = require_id(self.id, "task")
        return new_request("GET", f"{server}/projects/api/v3/tasks/{task_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.task = _SingleResponse.model_validate_json(body).task

    def populate_web_link(self, server: str) -> None:
        if self.task is not None:
            self.task.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    tag_ids: List[int] = Field(default_factory=list)
    match_all_tags: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    tasks: List[Task] = Field(default_factory=list)


class Multiple(Model):
    """List tasks, scoped to a project or a tasklist when either is set."""
    project_id: int = 0
    tasklist_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/tasks.json"
        elif self.tasklist_id > 0:
            url = f"{server}/projects/api/v3/tasklists/{self.tasklist_id}/tasks.json"
        else:
            url = f"{server}/projects/api/v3/tasks.json"
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
        for task in self.response.tasks:
            task.populate_web_link(server)


class Create(Model):
    """Create a task inside a tasklist."""
    name: str = ""
    description: Optional[str] = None
    priority: Optional[str] = None
    progress: Optional[int] = None
    start_at: Optional[Date] = Field(None, alias="startAt")
    due_at: Optional[Date] = Field(None, alias="dueAt")
    estimated_minutes: Optional[int] = Field(None, alias="estimatedMinutes")

    tasklist_id: int = Field(0, exclude=True)
    assignees: Optional[UserGroups] = None
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        tasklist_id = require_id(self.tasklist_id, "tasklist")
        return new_request(
            "POST",
            f"{server}/projects/api/v3/tasklists/{tasklist_id}/tasks.json",
            body=envelope("task", self),
        )


class Update(Model):
    """Update a task. Setting ``tasklist_id`` moves it to another tasklist."""
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    progress: Optional[int] = None
    start_at: Optional[Date] = Field(None, alias="startAt")
    due_at: Optional[Date] = Field(None, alias="dueAt")
    estimated_minutes: Optional[int] = Field(None, alias="estimatedMinutes")

    tasklist_id: Optional[int] = Field(None, alias="tasklistId")
    assignees: Optional[UserGroups] = None
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        task_id = require_id(self.id, "task")
        return new_request("PATCH", f"{server}/projects/api/v3/tasks/{task_id}.json", body=envelope("task", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        task_id = require_id(self.id, "task")
        return new_request("DELETE", f"{server}/projects/api/v3/tasks/{task_id}.json")
