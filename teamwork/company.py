"""Companies (clients): organizations the site offers services to."""

from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import Field

from teamwork.types import Model, PageMeta, Relationship
from teamwork.wire import Query, envelope, new_request, require_id


class Company(Model):
    id: int = 0
    address_one: str = Field("", alias="addressOne")
    address_two: str = Field("", alias="addressTwo")
    city: str = ""
    country_code: str = Field("", alias="countryCode")
    email_one: str = Field("", alias="emailOne")
    email_two: str = Field("", alias="emailTwo")
    email_three: str = Field("", alias="emailThree")
    fax: str = ""
    name: str = ""
    phone: str = ""
    profile: Optional[str] = Field(None, alias="profileText")
    state: str = ""
    website: str = ""
    zip: str = ""

    managed_by: Optional[Relationship] = Field(None, alias="clientManagedBy")
    industry: Optional[Relationship] = None
    tags: List[Relationship] = Field(default_factory=list)

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    status: str = ""
    web_link: Optional[str] = Field(None, alias="webLink")

    def populate_web_link(self, server: str) -> None:
        if self.id:
            self.web_link = f"{server}/app/clients/{self.id}"


class _SingleResponse(Model):
    company: Company


class Single(Model):
    id: int = 0
    company: Optional[Company] = None

    def build_request(self, server: str) -> httpx.Request:
        company_id = require_id(self.id, "company")
        return new_request("GET", f"{server}/projects/api/v3/companies/{company_id}.json")

    def decode_response(self, body: bytes) -> None:
        self.company = _SingleResponse.model_validate_json(body).company

    def populate_web_link(self, server: str) -> None:
        if self.company is not None:
            self.company.populate_web_link(server)


class Filters(Model):
    search_term: str = ""
    tag_ids: List[int] = Field(default_factory=list)
    match_all_tags: Optional[bool] = None
    page: int = 0
    page_size: int = 0


class Response(Model):
    meta: PageMeta = Field(default_factory=PageMeta)
    companies: List[Company] = Field(default_factory=list)


class Multiple(Model):
    filters: Filters = Field(default_factory=Filters)
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        query = (
            Query()
            .text("searchTerm", self.filters.search_term)
            .ids("tagIds", self.filters.tag_ids)
            .flag("matchAllTags", self.filters.match_all_tags)
            .positive("page", self.filters.page)
            .positive("pageSize", self.filters.page_size)
        )
        return new_request("GET", f"{server}/projects/api/v3/companies.json", query)

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)

    def populate_web_link(self, server: str) -> None:
        for company in self.response.companies:
            company.populate_web_link(server)


class _Fields(Model):
    """Writable company fields; the country code key is lower case on write."""
    address_one: Optional[str] = Field(None, alias="addressOne")
    address_two: Optional[str] = Field(None, alias="addressTwo")
    city: Optional[str] = None
    country_code: Optional[str] = Field(None, alias="countrycode")
    email_one: Optional[str] = Field(None, alias="emailOne")
    email_two: Optional[str] = Field(None, alias="emailTwo")
    email_three: Optional[str] = Field(None, alias="emailThree")
    fax: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    profile: Optional[str] = None
    state: Optional[str] = None
    website: Optional[str] = None
    zip: Optional[str] = None

    manager_id: Optional[int] = Field(None, alias="clientManagedBy")
    industry_id: Optional[int] = Field(None, alias="industryCatId")
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")


class Create(_Fields):
    name: str = ""

    def build_request(self, server: str) -> httpx.Request:
        return new_request("POST", f"{server}/projects/api/v3/companies.json", body=envelope("company", self))


class Update(_Fields):
    id: int = Field(0, exclude=True)

    def build_request(self, server: str) -> httpx.Request:
        company_id = require_id(self.id, "company")
        return new_request("PATCH", f"{server}/projects/api/v3/companies/{company_id}.json", body=envelope("company", self))


class Delete(Model):
    id: int = 0

    def build_request(self, server: str) -> httpx.Request:
        company_id = require_id(self.id, "company")
        return new_request("DELETE", f"{server}/projects/api/v3/companies/{company_id}.json")
