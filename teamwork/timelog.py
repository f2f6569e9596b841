"""Timelogs: time a user charged to a project or to one of its tasks."""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import Date, Time
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Timelog(Model):
    id: int = 0
    description: str = ""
    billable: bool = False
    minutes: int = 0
    logged_at: Optional[datetime] = Field(None, alias="timeLogged")

    user: Relationship = Field(default_factory=Relationship)
    task: Optional[Relationship] = None
    project: Relationship = Field(default_factory=Relationship)
    tags: List[Relationship] = Field(default_factory=list)

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    logged_by: int = Field(0, alias="loggedBy")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    updated_by: Optional[int] = Field(None, alias="updatedBy")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")
    deleted_by: Optional[int] = Field(None, alias="deletedBy")
    deleted: bool = False


class _SingleResponse(Model):
    timelog: Timelog


class Single(Model):
    id: int = 0
    timelog: Optional[Timelog] = None

    def build_request(self, server: str) -> httpx.Request:
        timelog_id = require_id(self.id, "timelog")
        return new_request("GET", f"{server}/projects/api/v3/time/{timelog_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.timelog = _SingleResponse.model_validate_json(body).timelog


class Filters(Model):
    tag_ids: List[int] = Field(default_factory=list)
    match_all_tags: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    timelogs: List[Timelog] = Field(default_factory=list)


class Multiple(Model):
    """List timelogs, scoped to a project or a task when either is set."""
    project_id: int = 0
    task_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/time.json"
        elif self.task_id > 0:
            url = f"{server}/projects/api/v3/tasks/{self.task_id}/time.json"
        else:
            url = f"{server}/projects/api/v3/time.json"
        query = (
            Query()
            .ids("tagIds", self.filters.tag_ids)
            .flag("matchAllTags", self.filters.match_all_tags)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)


class Create(Model):
    """Log time against a task, or against a project when no task is set."""
    description: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[Time] = None
    is_utc: bool = Field(False, alias="isUTC")
    hours: int = 0
    minutes: int = 0
    billable: bool = Field(False, alias="isBillable")

    project_id: int = Field(0, exclude=True)
    task_id: int = Field(0, exclude=True)
    user_id: Optional[int] = Field(None, alias="userId")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        if self.task_id > 0:
            url = f"{server}/projects/api/v3/tasks/{self.task_id}/time.json"
        elif self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/time.json"
        else:
            raise ValueError("missing project or task ID")
        return new_request("POST", url, body=envelope("timelog", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    description: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[Time] = None
    is_utc: Optional[bool] = Field(None, alias="isUTC")
    hours: Optional[int] = None
    minutes: Optional[int] = None
    billable: Optional[bool] = Field(None, alias="isBillable")

    user_id: Optional[int] = Field(None, alias="userId")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")

    def build_request(self, server: str) -> httpx.Request:
        timelog_id = require_id(self.id, "timelog")
        return new_request("PATCH", f"{server}/projects/api/v3/time/{timelog_id}.json", body=envelope("timelog", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        timelog_id = require_id(self.id, "timelog")
        return new_request("DELETE", f"{server}/projects/api/v3/time/{timelog_id}.json")
