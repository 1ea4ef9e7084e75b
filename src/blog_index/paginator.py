"""Slicing of the ordered post sequence into fixed-size pages."""

from collections.abc import Iterator, Sequence

from pydantic import BaseModel, ConfigDict

from blog_index.exceptions import InvalidConfiguration, OutOfRangeRequest
from blog_index.models import Post

DEFAULT_PAGINATE_PATH = "/page:num/"


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` posts, 0 when there are none."""
    if page_size <= 0:
        raise InvalidConfiguration(f"Page size must be positive, got {page_size}", page_size=page_size)
    return -(-count // page_size)


def page_path(page_index: int, paginate_path: str = DEFAULT_PAGINATE_PATH) -> str:
    """Url of an index page. The first page is always the site root."""
    if page_index == 1:
        return "/"
    return paginate_path.replace(":num", str(page_index))


class Paginator(BaseModel):
    """One page of the index listing plus the data needed to navigate it."""

    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int
    posts: list[Post]
    total_posts: int
    total_pages: int
    paginate_path: str = DEFAULT_PAGINATE_PATH

    @property
    def has_navigation(self) -> bool:
        return self.total_pages > 1

    @property
    def previous_page(self) -> int | None:
        return self.page - 1 if self.page > 1 else None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.page < self.total_pages else None

    @property
    def path(self) -> str:
        return page_path(self.page, self.paginate_path)

    @property
    def previous_page_path(self) -> str | None:
        if self.previous_page is None:
            return None
        return page_path(self.previous_page, self.paginate_path)

    @property
    def next_page_path(self) -> str | None:
        if self.next_page is None:
            return None
        return page_path(self.next_page, self.paginate_path)


def paginate(
    posts: Sequence[Post],
    page_size: int,
    page_index: int,
    paginate_path: str = DEFAULT_PAGINATE_PATH,
) -> Paginator:
    """Build the Paginator for one page.

    Args:
        posts: Posts in canonical (newest-first) order.
        page_size: Maximum number of posts per page.
        page_index: 1-based index of the requested page.
        paginate_path: Url pattern for pages after the first.

    Returns:
        Paginator holding ``posts[(page_index-1)*page_size : page_index*page_size]``.

    Raises:
        InvalidConfiguration: If page_size is not positive.
        OutOfRangeRequest: If page_index is outside [1, total_pages].
    """
    pages = total_pages(len(posts), page_size)
    if not 1 <= page_index <= pages:
        raise OutOfRangeRequest(page_index, pages)

    start = (page_index - 1) * page_size
    return Paginator(
        page=page_index,
        page_size=page_size,
        posts=list(posts[start : start + page_size]),
        total_posts=len(posts),
        total_pages=pages,
        paginate_path=paginate_path,
    )


def iter_pages(
    posts: Sequence[Post],
    page_size: int,
    paginate_path: str = DEFAULT_PAGINATE_PATH,
) -> Iterator[Paginator]:
    """Yield a Paginator for every page in order. Nothing for no posts."""
    for page_index in range(1, total_pages(len(posts), page_size) + 1):
        yield paginate(posts, page_size, page_index, paginate_path)
