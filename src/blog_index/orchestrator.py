"""Orchestrator for the content-to-site build."""

import logging
from typing import Any

from blog_index.config import PaginationConfig
from blog_index.exceptions import InvalidConfiguration
from blog_index.paginator import iter_pages, page_path
from blog_index.renderer import SiteRenderer
from blog_index.store import ContentStore
from blog_index.writer import SiteWriter

logger = logging.getLogger(__name__)

ARCHIVE_URL = "/archive.html"


def resolve_page_size(pagination: PaginationConfig, post_count: int) -> int:
    """Page size to slice the index with.

    Disabled pagination, or a page size of 0, puts every post on a single
    page.

    Raises:
        InvalidConfiguration: If pagination is enabled with a negative page size.
    """
    if not pagination.enabled or pagination.page_size == 0:
        logger.info("Pagination disabled, listing all %d posts on one page", post_count)
        return max(post_count, 1)

    if pagination.page_size < 0:
        raise InvalidConfiguration(
            f"Page size must be positive, got {pagination.page_size}",
            page_size=pagination.page_size,
        )
    return pagination.page_size


def build(
    store: ContentStore,
    writer: SiteWriter | Any,
    pagination: PaginationConfig | None = None,
    renderer: SiteRenderer | Any | None = None,
) -> dict[str, int]:
    """Execute the build pipeline.

    Args:
        store: Every post known to this build.
        writer: SiteWriter instance (or mock for testing).
        pagination: Pagination options. Defaults to ``PaginationConfig()``.
        renderer: SiteRenderer instance. Defaults to one with stock templates.

    Returns:
        Dictionary with 'posts_found', 'index_pages_written',
        'archive_pages_written' and 'post_pages_written' counts.

    Raises:
        InvalidConfiguration: If the page size is negative. The archive page
            has already been written at that point.
        OutputError: If a page cannot be written.
    """
    pagination = pagination or PaginationConfig()
    renderer = renderer or SiteRenderer()
    posts = store.all_posts()

    writer.write(ARCHIVE_URL, renderer.render_archive_page(posts))

    page_size = resolve_page_size(pagination, len(posts))
    index_pages_written = 0
    for paginator in iter_pages(posts, page_size, pagination.paginate_path):
        writer.write(paginator.path, renderer.render_index_page(paginator))
        index_pages_written += 1

    if not index_pages_written:
        logger.info("No posts found, writing index page without a listing")
        writer.write(page_path(1), renderer.render_index_page(None))
        index_pages_written = 1

    for post in posts:
        writer.write(post.url, renderer.render_post_page(post))

    logger.info(
        "Built %d index pages, 1 archive page and %d post pages",
        index_pages_written,
        len(posts),
    )

    return {
        "posts_found": len(posts),
        "index_pages_written": index_pages_written,
        "archive_pages_written": 1,
        "post_pages_written": len(posts),
    }
