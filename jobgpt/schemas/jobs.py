from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(default="", max_length=500)
    user_id: str | None = Field(default=None, alias="userId")


class JobSearchResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    jobs: list[Any]
