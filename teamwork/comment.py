"""Comments: notes posted on tasks, milestones, files, notebooks and messages."""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id

# Object types a comment can be posted on, as they appear in the legacy URL.
OBJECT_TYPES = ("tasks", "messages", "milestones", "files", "notebooks")
CONTENT_TYPES = ("TEXT", "HTML")


class Comment(Model):
    id: int = 0
    body: str = ""
    html_body: str = Field("", alias="htmlBody")
    content_type: str = Field("", alias="contentType")

    object: Optional[Relationship] = None
    project: Relationship = Field(default_factory=Relationship)

    posted_by: Optional[int] = Field(None, alias="postedBy")
    posted_at: Optional[datetime] = Field(None, alias="postedDateTime")
    last_edited_by: Optional[int] = Field(None, alias="lastEditedBy")
    edited_at: Optional[datetime] = Field(None, alias="dateLastEdited")
    deleted: bool = False
    deleted_by: Optional[int] = Field(None, alias="deletedBy")
    deleted_at: Optional[datetime] = Field(None, alias="dateDeleted")
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        # A comment is shown on the page of the object it belongs to.
        if self.object is not None and self.id:
            self.web_link = f"{server}/#{self.object.type}/{self.object.id}?c={self.id}"


class _SingleResponse(Model):
    comment: Comment = Field(alias="comments")


class Single(Model):
    id: int = 0
    comment: Optional[Comment] = None

    def build_request(self, server: str) -> httpx.Request:
        comment_id = require_id(self.id, "comment")
        return new_request("GET", f"{server}/projects/api/v3/comments/{comment_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.comment = _SingleResponse.model_validate_json(body).comment

    def populate_web_link(self, server: str) -> None:
        if self.comment is not None:
            self.comment.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    user_ids: List[int] = Field(default_factory=list)
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    comments: List[Comment] = Field(default_factory=list)


class Multiple(Model):
    """List comments, scoped to one commented object when its ID is set.

    The first positive scope wins, in file, file version, milestone,
    notebook, task order.
    """
    file_id: int = 0
    file_version_id: int = 0
    milestone_id: int = 0
    notebook_id: int = 0
    task_id: int = 0
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        base = f"{server}/projects/api/v3"
        if self.file_id > 0:
            url = f"{base}/files/{self.file_id}/comments.json"
        elif self.file_version_id > 0:
            url = f"{base}/fileversions/{self.file_version_id}/comments.json"
        elif self.milestone_id > 0:
            url = f"{base}/milestones/{self.milestone_id}/comments.json"
        elif self.notebook_id > 0:
            url = f"{base}/notebooks/{self.notebook_id}/comments.json"
        elif self.task_id > 0:
            url = f"{base}/tasks/{self.task_id}/comments.json"
        else:
            url = f"{base}/comments.json"
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .ids("userIds", self.filters.user_ids)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", url, query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for comment in self.response.comments:
            comment.populate_web_link(server)


class Create(Model):
    """Post a comment on ``object`` (legacy endpoint, ``comment`` envelope)."""
    object: Relationship = Field(default_factory=Relationship, exclude=True)
    body: str = ""
    content_type: Optional[str] = Field(None, alias="contentType")

    def build_request(self, server: str) -> httpx.Request:
        if not self.object.type:
            raise ValueError("missing comment object type")
        object_id = require_id(self.object.id, "comment object")
        url = f"{server}/{self.object.type}/{object_id}/comments.json"
        return new_request("POST", url, body=envelope("comment", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    body: str = ""
    content_type: Optional[str] = Field(None, alias="content-type")

    def build_request(self, server: str) -> httpx.Request:
        comment_id = require_id(self.id, "comment")
        return new_request("PUT", f"{server}/comments/{comment_id}.json", body=envelope("comment", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        comment_id = require_id(self.id, "comment")
        return new_request("DELETE", f"{server}/comments/{comment_id}.json")
