"""Workload: day-by-day capacity of users over a date range.

Days a user has nothing scheduled are left out of the report
(``omitEmptyDateEntries`` is always sent), so a missing date means the user
is available that day.
"""

from typing import Dict, List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import Date
from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, new_request


class UserDate(Model):
    capacity: float = 0
    capacity_minutes: int = Field(0, alias="capacityMinutes")
    unavailable_day: bool = Field(False, alias="unavailableDay")


class UserWorkload(Model):
    id: int = Field(0, alias="userId")
    dates: Dict[Date, UserDate] = Field(default_factory=dict)


class Workload(Model):
    users: List[UserWorkload] = Field(default_factory=list)


# ─── Sideloaded records ─────────────────────────────────────────

class IncludedUser(Model):
    id: int = 0
    length_of_day: float = Field(0, alias="lengthOfDay")
    working_hour: Optional[Relationship] = Field(None, alias="workingHour")


class WorkingHour(Model):
    id: int = 0
    object: Relationship = Field(default_factory=Relationship)
    entries: List[Relationship] = Field(default_factory=list)


class WorkingHourEntry(Model):
    id: int = 0
    working_hour: Relationship = Field(default_factory=Relationship, alias="workingHour")
    weekday: str = ""
    task_hours: float = Field(0, alias="taskHours")


class Included(Model):
    users: Dict[str, IncludedUser] = Field(default_factory=dict)
    working_hours: Dict[str, WorkingHour] = Field(default_factory=dict, alias="workingHours")
    working_hour_entries: Dict[str, WorkingHourEntry] = Field(default_factory=dict, alias="workingHourEntries")


# ─── Request ────────────────────────────────────────────────────

class Filters(Model):
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    user_ids: List[int] = Field(default_factory=list)
    page: int = 0
    page_size: int = 0
    include: List[str] = Field(default_factory=list)


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    workload: Workload = Field(default_factory=Workload)
    included: Included = Field(default_factory=Included)


class Single(Model):
    """Workload report for the users and dates in ``filters``."""
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .value("startDate", self.filters.start_date)
            .value("endDate", self.filters.end_date)
            .ids("userIds", self.filters.user_ids)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
            .words("include", self.filters.include)
            .text("omitEmptyDateEntries", "true")
        )
        return new_request("GET", f"{server}/projects/api/v3/workload", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)
