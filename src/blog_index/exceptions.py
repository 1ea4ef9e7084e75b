"""Custom exceptions for the blog index build."""

from pathlib import Path


class BuildError(Exception):
    """Base class for errors that abort a site build."""


class InvalidConfiguration(BuildError):
    """Raised when pagination is configured with a non-positive page size."""

    def __init__(self, message: str, page_size: int | None = None) -> None:
        self.page_size = page_size
        super().__init__(message)


class OutOfRangeRequest(BuildError):
    """Raised when a page outside [1, total_pages] is requested.

    Only the build driver requests pages, and it enumerates them from
    ``total_pages``, so this always indicates a programming error.
    """

    def __init__(self, page_index: int, total_pages: int) -> None:
        self.page_index = page_index
        self.total_pages = total_pages
        super().__init__(f"Page {page_index} requested but only {total_pages} page(s) exist")


class ContentError(BuildError):
    """Raised when a post document cannot be turned into a Post."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class DuplicatePostError(ContentError):
    """Raised when two posts resolve to the same url."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Duplicate post url {url}")


class OutputError(BuildError):
    """Raised when a rendered page cannot be written."""

    def __init__(self, message: str, path: Path | None = None, original_error: Exception | None = None) -> None:
        self.path = path
        self.original_error = original_error
        super().__init__(message)
