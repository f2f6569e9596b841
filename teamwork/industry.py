"""Industries: the fixed catalog of categories a company can belong to."""

from typing import List

import httpx
from pydantic import Field

from teamwork.types import Model
from teamwork.wire import new_request


class Industry(Model):
    id: int = 0
    name: str = ""


class Response(Model):
    industries: List[Industry] = Field(default_factory=list)


class Multiple(Model):
    response: Response = Field(default_factory=Response)

    def build_request(self, server: str) -> httpx.Request:
        return new_request("GET", f"{server}/industries.json")

    def decode_response(self, body: bytes) -> None:
        self.response = Response.model_validate_json(body)
