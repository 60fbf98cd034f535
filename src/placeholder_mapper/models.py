"""Response bodies for the gateway."""

from __future__ import annotations

from pydantic import BaseModel


class Resolution(BaseModel):
    uuid: str
    url: str
    post_id: str


class Existence(BaseModel):
    uuid: str
    exists: bool
