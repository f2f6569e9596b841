"""Teams: named groups of users, optionally nested and tied to a company or project.

Every team endpoint is legacy: identifiers arrive as numeric strings and the
member list is sent as one comma-joined string.
"""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.scalars import LegacyNumber, LegacyNumericList, OptionalDateTime
from teamwork.types import LegacyRelationship, Model
from teamwork.wire import Query, envelope, new_request, require_id


class TeamCompany(Model):
    id: LegacyNumber = LegacyNumber(0)
    name: str = ""


class TeamRef(Model):
    id: LegacyNumber = LegacyNumber(0)
    name: str = ""
    handle: str = ""


class Team(Model):
    id: LegacyNumber = LegacyNumber(0)
    name: str = ""
    description: Optional[str] = None
    handle: str = ""
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    logo_icon: Optional[str] = Field(None, alias="logoIcon")
    logo_color: Optional[str] = Field(None, alias="logoColor")

    project_id: LegacyNumber = Field(LegacyNumber(0), alias="projectId")
    company: Optional[TeamCompany] = None
    parent_team: Optional[TeamRef] = Field(None, alias="parentTeam")
    root_team: Optional[TeamRef] = Field(None, alias="rootTeam")
    members: List[LegacyRelationship] = Field(default_factory=list)

    created_by: LegacyNumber = Field(LegacyNumber(0), alias="createdByUserId")
    created_at: Optional[datetime] = Field(None, alias="dateCreated")
    updated_by: LegacyNumber = Field(LegacyNumber(0), alias="updatedByUserId")
    updated_at: Optional[datetime] = Field(None, alias="dateUpdated")
    deleted: bool = False
    deleted_at: Optional[OptionalDateTime] = Field(None, alias="deletedDate")
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/teams/{self.id}"


class _SingleResponse(Model):
    team: Team


class Single(Model):
    id: int = 0
    team: Optional[Team] = None

    def build_request(self, server: str) -> httpx.Request:
        team_id = require_id(self.id, "team")
        return new_request("GET", f"{server}/teams/{team_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.team = _SingleResponse.model_validate_json(body).team

    def populate_web_link(self, server: str) -> None:
        if self.team is not None:
            self.team.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    page: int = 0
    page_size: int = 0


class Response(Model):
    """The legacy list carries no pagination metadata."""
    teams: List[Team] = Field(default_factory=list)


class Multiple(Model):
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", f"{server}/teams.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for team in self.response.teams:
            team.populate_web_link(server)


class Create(Model):
    """Create a team. The server answers with ``{"id": "<id>"}``."""
    name: str = ""
    handle: Optional[str] = None
    description: Optional[str] = None
    parent_team_id: Optional[int] = Field(None, alias="parentTeamId")
    company_id: Optional[int] = Field(None, alias="companyId")
    project_id: Optional[int] = Field(None, alias="projectId")
    user_ids: Optional[LegacyNumericList] = Field(None, alias="userIds")

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/teams.json", body=envelope("team", self))


class Update(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    handle: Optional[str] = None
    description: Optional[str] = None
    company_id: Optional[int] = Field(None, alias="companyId")
    project_id: Optional[int] = Field(None, alias="projectId")
    user_ids: Optional[LegacyNumericList] = Field(None, alias="userIds")

    def build_request(self, server: str) -> httpx.Request:
        team_id = require_id(self.id, "team")
        return new_request("PUT", f"{server}/teams/{team_id}.json", body=envelope("team", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        team_id = require_id(self.id, "team")
        return new_request("DELETE", f"{server}/teams/{team_id}.json")
