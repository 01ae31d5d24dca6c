"""Blog post data models."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostMetadata(BaseModel):
    """Front-matter of a markdown post, validated at load time."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., min_length=1)
    description: str
    date: str
    categories: list[str] = []
    published: bool
    reading_time: int | None = Field(default=None, alias="readingTime", ge=1)

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_iso(cls, value: Any) -> Any:
        """YAML turns unquoted dates into date objects; keep the ISO string."""
        if isinstance(value, dt.date):
            return value.isoformat()
        return value

    @field_validator("categories", mode="before")
    @classmethod
    def _single_category(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class Post(BaseModel):
    """A published post as listed in the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str
    date: str
    categories: tuple[str, ...] = ()
    published: bool
    slug: str
    reading_time: int = Field(..., alias="readingTime", ge=1)


class PostDetail(Post):
    """A single post with its rendered body."""

    html: str
