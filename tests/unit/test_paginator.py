"""Unit tests for pagination of the ordered post sequence."""

from datetime import datetime, timedelta

import pytest

from blog_index.exceptions import InvalidConfiguration, OutOfRangeRequest
from blog_index.models import Post
from blog_index.paginator import iter_pages, page_path, paginate, total_pages


def make_posts(count: int) -> list[Post]:
    """Posts ranked 1..count, newest first."""
    newest = datetime(2024, 6, 1)
    return [
        Post(
            title=f"Post {rank}",
            url=f"/post-{rank}.html",
            publish_date=newest - timedelta(days=rank),
        )
        for rank in range(1, count + 1)
    ]


class TestTotalPages:
    """Tests for the page count calculation."""

    @pytest.mark.parametrize(
        "count, page_size, expected",
        [(0, 3, 0), (3, 3, 1), (4, 3, 2), (7, 3, 3), (1, 5, 1), (10, 1, 10)],
    )
    def test_ceiling_of_count_over_page_size(self, count, page_size, expected):
        assert total_pages(count, page_size) == expected

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size_is_invalid(self, page_size):
        with pytest.raises(InvalidConfiguration) as exc_info:
            total_pages(5, page_size)

        assert exc_info.value.page_size == page_size


class TestPaginate:
    """Tests for slicing a single page."""

    def test_seven_posts_in_pages_of_three(self):
        """Page 2 holds the posts ranked 4-6."""
        posts = make_posts(7)

        page = paginate(posts, page_size=3, page_index=2)

        assert page.total_pages == 3
        assert page.total_posts == 7
        assert [p.title for p in page.posts] == ["Post 4", "Post 5", "Post 6"]

    def test_last_page_is_clipped(self):
        page = paginate(make_posts(7), page_size=3, page_index=3)

        assert [p.title for p in page.posts] == ["Post 7"]

    def test_single_post_single_page(self):
        page = paginate(make_posts(1), page_size=5, page_index=1)

        assert page.total_pages == 1
        assert len(page.posts) == 1
        assert not page.has_navigation

    @pytest.mark.parametrize("page_index", [0, 4, -1])
    def test_out_of_range_page_is_rejected(self, page_index):
        with pytest.raises(OutOfRangeRequest) as exc_info:
            paginate(make_posts(7), page_size=3, page_index=page_index)

        assert exc_info.value.page_index == page_index
        assert exc_info.value.total_pages == 3

    def test_no_posts_means_no_pages_to_request(self):
        with pytest.raises(OutOfRangeRequest):
            paginate([], page_size=3, page_index=1)

    def test_zero_page_size_is_invalid(self):
        with pytest.raises(InvalidConfiguration):
            paginate(make_posts(3), page_size=0, page_index=1)


class TestIterPages:
    """Tests for enumerating every page."""

    @pytest.mark.parametrize("count", [1, 2, 3, 6, 7, 10])
    @pytest.mark.parametrize("page_size", [1, 3, 5])
    def test_pages_cover_every_post_once_in_order(self, count, page_size):
        posts = make_posts(count)

        pages = list(iter_pages(posts, page_size))

        assert [p for page in pages for p in page.posts] == posts
        assert all(len(page.posts) == page_size for page in pages[:-1])
        assert len(pages[-1].posts) == (count % page_size or page_size)

    def test_page_sizes_for_seven_by_three(self):
        pages = list(iter_pages(make_posts(7), 3))

        assert [len(page.posts) for page in pages] == [3, 3, 1]
        assert [page.page for page in pages] == [1, 2, 3]

    def test_no_posts_yields_no_pages(self):
        assert list(iter_pages([], 3)) == []


class TestNavigation:
    """Tests for previous/next navigation data."""

    def test_first_page_links_forward_only(self):
        page = paginate(make_posts(7), page_size=3, page_index=1)

        assert page.has_navigation
        assert page.previous_page is None
        assert page.previous_page_path is None
        assert page.next_page == 2
        assert page.next_page_path == "/page2/"

    def test_middle_page_links_both_ways(self):
        page = paginate(make_posts(7), page_size=3, page_index=2)

        assert page.previous_page == 1
        assert page.previous_page_path == "/"
        assert page.next_page == 3
        assert page.next_page_path == "/page3/"

    def test_last_page_links_backward_only(self):
        page = paginate(make_posts(7), page_size=3, page_index=3)

        assert page.previous_page_path == "/page2/"
        assert page.next_page is None
        assert page.next_page_path is None

    def test_custom_paginate_path(self):
        page = paginate(make_posts(7), page_size=3, page_index=2, paginate_path="/blog/page/:num/")

        assert page.path == "/blog/page/2/"
        assert page.next_page_path == "/blog/page/3/"
        assert page.previous_page_path == "/"

    def test_first_page_is_site_root(self):
        assert page_path(1) == "/"
        assert page_path(4) == "/page4/"
