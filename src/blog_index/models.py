"""Pydantic models for blog content."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Post(BaseModel):
    """Represents one published article."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    publish_date: datetime
    body: str = ""
    excerpt: str | None = None
    slug: str = ""
    tags: tuple[str, ...] = ()
