"""Configuration management via environment variables."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_index.excerpt import DEFAULT_EXCERPT_LENGTH, DEFAULT_EXCERPT_SEPARATOR
from blog_index.paginator import DEFAULT_PAGINATE_PATH


class PaginationConfig(BaseModel):
    """Pagination options for the index listing.

    A ``page_size`` of 0 turns pagination off just like ``enabled=False``.
    """

    enabled: bool = True
    page_size: int = 5
    paginate_path: str = DEFAULT_PAGINATE_PATH


class Config(BaseSettings):
    """Build configuration loaded from ``BLOG_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="BLOG_")

    content_dir: Path
    output_dir: Path = Path("_site")
    templates_dir: Path | None = None
    site_title: str = "Blog"
    base_url: str = ""
    paginate: bool = True
    page_size: int = 5
    paginate_path: str = DEFAULT_PAGINATE_PATH
    excerpt_length: int = Field(default=DEFAULT_EXCERPT_LENGTH, gt=0)
    excerpt_separator: str = DEFAULT_EXCERPT_SEPARATOR

    @field_validator("site_title")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v

    @field_validator("paginate_path")
    @classmethod
    def must_contain_page_number(cls, v: str) -> str:
        """Require a ``/``-rooted pattern with a ``:num`` placeholder."""
        if not v.startswith("/") or ":num" not in v:
            raise ValueError("must start with '/' and contain ':num'")
        return v

    def pagination(self) -> PaginationConfig:
        return PaginationConfig(
            enabled=self.paginate,
            page_size=self.page_size,
            paginate_path=self.paginate_path,
        )
