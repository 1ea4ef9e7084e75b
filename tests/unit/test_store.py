"""Unit tests for the ContentStore."""

from datetime import datetime

import pytest

from blog_index.exceptions import DuplicatePostError
from blog_index.models import Post
from blog_index.store import ContentStore


def make_post(title: str, day: int, hour: int = 0) -> Post:
    slug = title.lower().replace(" ", "-")
    return Post(
        title=title,
        url=f"/2024/03/{day:02d}/{slug}.html",
        publish_date=datetime(2024, 3, day, hour),
        slug=slug,
    )


class TestContentStore:
    """Tests for ordering and lookup in the ContentStore."""

    def test_posts_are_newest_first(self):
        store = ContentStore([make_post("Old", 1), make_post("New", 20), make_post("Middle", 10)])

        assert [p.title for p in store.all_posts()] == ["New", "Middle", "Old"]

    def test_same_date_ties_are_broken_by_title(self):
        """Posts published at the same moment are ordered by title."""
        posts = [make_post("Zebra", 5), make_post("Apple", 5), make_post("Mango", 5)]

        first = ContentStore(posts).all_posts()
        second = ContentStore(reversed(posts)).all_posts()

        assert [p.title for p in first] == ["Apple", "Mango", "Zebra"]
        assert first == second

    def test_time_of_day_counts_toward_order(self):
        store = ContentStore([make_post("Morning", 5, hour=8), make_post("Evening", 5, hour=20)])

        assert [p.title for p in store.all_posts()] == ["Evening", "Morning"]

    def test_empty_store_yields_empty_sequence(self):
        store = ContentStore()

        assert store.all_posts() == []
        assert len(store) == 0

    def test_duplicate_url_is_rejected(self):
        post = make_post("Hello", 1)

        with pytest.raises(DuplicatePostError) as exc_info:
            ContentStore([post, post])

        assert exc_info.value.url == post.url

    def test_all_posts_returns_a_copy(self):
        """Callers cannot reorder the store through the returned list."""
        store = ContentStore([make_post("A", 1), make_post("B", 2)])

        store.all_posts().reverse()

        assert [p.title for p in store.all_posts()] == ["B", "A"]

    def test_length_counts_unique_posts(self):
        store = ContentStore([make_post("Hello", 1), make_post("World", 2)])

        assert len(store) == 2

    def test_from_directory_loads_posts(self, tmp_path):
        posts_dir = tmp_path / "_posts"
        posts_dir.mkdir()
        (posts_dir / "2024-01-01-first.md").write_text("---\ntitle: First\n---\nBody\n")
        (posts_dir / "2024-02-01-second.md").write_text("---\ntitle: Second\n---\nBody\n")

        store = ContentStore.from_directory(tmp_path)

        assert [p.title for p in store.all_posts()] == ["Second", "First"]
