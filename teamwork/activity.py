"""Activity feed: the latest changes across the site or inside one project."""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import OptionalDateTime
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, new_request

LOG_ITEM_TYPES = (
    "message",
    "comment",
    "task",
    "tasklist",
    "taskgroup",
    "milestone",
    "file",
    "form",
    "notebook",
    "timelog",
    "task_comment",
    "notebook_comment",
    "file_comment",
    "link_comment",
    "milestone_comment",
    "project",
    "link",
    "billingInvoice",
    "risk",
    "projectUpdate",
    "reacted",
    "budget",
)


class Activity(Model):
    id: int = 0
    action: str = Field("", alias="activityType")
    latest_action: str = Field("", alias="latestActivityType")
    at: Optional[datetime] = Field(None, alias="dateTime")
    description: Optional[str] = None
    extra_description: Optional[str] = Field(None, alias="extraDescription")
    public_info: Optional[str] = Field(None, alias="publicInfo")
    due_at: Optional[datetime] = Field(None, alias="dueDate")
    for_user_name: Optional[str] = Field(None, alias="forUserName")
    item_link: Optional[str] = Field(None, alias="itemLink")
    link: Optional[str] = None

    user: Relationship = Field(default_factory=Relationship)
    for_user: Optional[Relationship] = Field(None, alias="forUser")
    project: Relationship = Field(default_factory=Relationship)
    company: Relationship = Field(default_factory=Relationship)
    item: Relationship = Field(default_factory=Relationship)


class Filters(Model):
    start_date: Optional[OptionalDateTime] = None
    end_date: Optional[OptionalDateTime] = None
    log_item_types: List[str] = Field(default_factory=list)
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    activities: List[Activity] = Field(default_factory=list)


class Multiple(Model):
    """Latest activity, scoped to a project when ``project_id`` is set."""
    project_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        if self.project_id > 0:
            url = f"{server}/projects/api/v3/projects/{self.project_id}/latestactivity.json"
        else:
            url = f"{server}/projects/api/v3/latestactivity.json"
        query = (
            Query()
            .value("startDate", _moment(self.filters.start_date))
            .value("endDate", _moment(self.filters.end_date))
            .words("activityTypes", self.filters.log_item_types)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)


def _moment(value: Optional[OptionalDateTime]) -> Optional[OptionalDateTime]:
    if value is None or value.is_zero():
        return None
    return value
