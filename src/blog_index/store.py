"""Read-only collection of the posts known to a build."""

import logging
from collections.abc import Iterable
from pathlib import Path

from blog_index.exceptions import DuplicatePostError
from blog_index.loader import load_posts
from blog_index.models import Post

logger = logging.getLogger(__name__)


class ContentStore:
    """Holds every Post for the duration of one build.

    Posts are ordered newest-first. Posts published at the same moment are
    ordered by title, then url, so identical input always gives identical
    output.
    """

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        """Initialize the store.

        Args:
            posts: The posts discovered for this build, in any order.

        Raises:
            DuplicatePostError: If two posts share a url.
        """
        seen: dict[str, Post] = {}
        for post in posts:
            if post.url in seen:
                raise DuplicatePostError(post.url)
            seen[post.url] = post

        ordered = sorted(seen.values(), key=lambda p: (p.title, p.url))
        ordered.sort(key=lambda p: p.publish_date, reverse=True)

        self._posts = tuple(ordered)

    @classmethod
    def from_directory(cls, content_dir: Path | str) -> "ContentStore":
        """Load every published post under ``content_dir``."""
        store = cls(load_posts(content_dir))
        logger.info("Loaded %d posts from %s", len(store), content_dir)
        return store

    def all_posts(self) -> list[Post]:
        """Return every post, newest first."""
        return list(self._posts)

    def __len__(self) -> int:
        return len(self._posts)
