"""Timers: running clocks owned by the authenticated user that end up as timelogs."""

from datetime import datetime
from typing import ClassVar, List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Interval(Model):
    id: int = 0
    start: Optional[datetime] = Field(None, alias="from")
    end: Optional[datetime] = Field(None, alias="to")
    duration: int = 0


class Timer(Model):
    id: int = 0
    description: str = ""
    running: bool = False
    billable: bool = False

    user: Relationship = Field(default_factory=Relationship)
    task: Optional[Relationship] = None
    project: Relationship = Field(default_factory=Relationship)
    timelog: Optional[Relationship] = None

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")
    deleted: bool = False
    duration: int = 0
    last_started_at: Optional[datetime] = Field(None, alias="lastStartedAt")
    last_interval_at: Optional[datetime] = Field(None, alias="timerLastIntervalEnd")
    intervals: List[Interval] = Field(default_factory=list)


class _SingleResponse(Model):
    timer: Timer


class Single(Model):
    id: int = 0
    timer: Optional[Timer] = None

    def build_request(self, server: str) -> httpx.Request:
        timer_id = require_id(self.id, "timer")
        return new_request("GET", f"{server}/projects/api/v3/timers/{timer_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.timer = _SingleResponse.model_validate_json(body).timer


class Filters(Model):
    user_id: int = 0
    task_id: int = 0
    project_id: int = 0
    running_timers_only: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    timers: List[Timer] = Field(default_factory=list)


class Multiple(Model):
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .positive("userId", self.filters.user_id)
            .positive("taskId", self.filters.task_id)
            .positive("projectId", self.filters.project_id)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        # Only sent when asked for; false is the server default.
        if self.filters.running_timers_only:
            query.flag("runningTimersOnly", True)
        return new_request("GET", f"{server}/projects/api/v3/timers.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)


class Create(Model):
    description: Optional[str] = None
    billable: Optional[bool] = Field(None, alias="isBillable")
    running: Optional[bool] = Field(None, alias="isRunning")
    seconds: Optional[int] = None
    stop_running_timers: Optional[bool] = Field(None, alias="stopRunningTimers")

    project_id: Optional[int] = Field(None, alias="projectId")
    task_id: Optional[int] = Field(None, alias="taskId")

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/projects/api/v3/me/timers.json", body=envelope("timer", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    description: Optional[str] = None
    billable: Optional[bool] = Field(None, alias="isBillable")
    running: Optional[bool] = Field(None, alias="isRunning")

    project_id: Optional[int] = Field(None, alias="projectId")
    task_id: Optional[int] = Field(None, alias="taskId")

    def build_request(self, server: str) -> httpx.Request:
        timer_id = require_id(self.id, "timer")
        return new_request("PUT", f"{server}/projects/api/v3/me/timers/{timer_id}.json", body=envelope("timer", self))


# ─── State changes ──────────────────────────────────────────────

class _Transition(Model):
    """Body-less ``PUT /me/timers/{id}/<action>.json``."""
    id: int = 0

    action: ClassVar[str] = ""

    def build_request(self, server: str) -> httpx.Request:
        timer_id = require_id(self.id, "timer")
        return new_request("PUT", f"{server}/projects/api/v3/me/timers/{timer_id}/{self.action}.json")


class Pause(_Transition):
    action: ClassVar[str] = "pause"


class Resume(_Transition):
    action: ClassVar[str] = "resume"


class Complete(_Transition):
    """Stop the timer and turn it into a timelog on its project."""
    action: ClassVar[str] = "complete"


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        timer_id = require_id(self.id, "timer")
        return new_request("DELETE", f"{server}/projects/api/v3/me/timers/{timer_id}.json")
