"""Tags: labels attached to projects, tasks and other items."""

from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id

ITEM_TYPES = (
    "project",
    "task",
    "tasklist",
    "milestone",
    "message",
    "timelog",
    "notebook",
    "file",
    "company",
    "link",
)


class Tag(Model):
    id: int = 0
    name: str = ""
    project: Optional[Relationship] = None
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        # Tags have no page of their own, only the settings listing.
        if self.id:
            self.web_link = f"{server}/app/settings/tags"


class _SingleResponse(Model):
    tag: Tag


class Single(Model):
    id: int = 0
    tag: Optional[Tag] = None

    def build_request(self, server: str) -> httpx.Request:
        tag_id = require_id(self.id, "tag")
        return new_request("GET", f"{server}/projects/api/v3/tags/{tag_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.tag = _SingleResponse.model_validate_json(body).tag

    def populate_web_link(self, server: str) -> None:
        if self.tag is not None:
            self.tag.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    item_type: str = ""
    project_ids: List[int] = Field(default_factory=list)
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    tags: List[Tag] = Field(default_factory=list)


class Multiple(Model):
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .text("itemType", self.filters.item_type)
            .ids("projectIds", self.filters.project_ids)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", f"{server}/projects/api/v3/tags.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for tag in self.response.tags:
            tag.populate_web_link(server)


class Create(Model):
    name: str = ""
    project_id: Optional[int] = Field(None, alias="projectId")

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/projects/api/v3/tags.json", body=envelope("tag", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    project_id: Optional[int] = Field(None, alias="projectId")

    def build_request(self, server: str) -> httpx.Request:
        tag_id = require_id(self.id, "tag")
        return new_request("PATCH", f"{server}/projects/api/v3/tags/{tag_id}.json", body=envelope("tag", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        tag_id = require_id(self.id, "tag")
        return new_request("DELETE", f"{server}/projects/api/v3/tags/{tag_id}.json")
