"""HTML rendering of listing fragments and full pages with Jinja2."""

from collections.abc import Sequence
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape

from blog_index.excerpt import DEFAULT_EXCERPT_LENGTH, DEFAULT_EXCERPT_SEPARATOR, excerpt_for
from blog_index.models import Post
from blog_index.paginator import Paginator

TEMPLATES_DIR = Path(__file__).parent / "templates"
MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def markdown_to_html(text: str) -> str:
    """Convert markdown source to an HTML fragment."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


class SiteRenderer:
    """Renders excerpts, the archive list and complete pages."""

    def __init__(
        self,
        site_title: str = "Blog",
        base_url: str = "",
        templates_dir: Path | str | None = None,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        excerpt_separator: str | None = DEFAULT_EXCERPT_SEPARATOR,
    ) -> None:
        """Initialize the renderer.

        Args:
            site_title: Title shown in every page header.
            base_url: Prefix for every generated link, without trailing slash.
            templates_dir: Optional folder whose templates override the
                packaged ones by name.
            excerpt_length: Upper bound for derived excerpts.
            excerpt_separator: End-of-excerpt marker inside post bodies.
        """
        search_path = [str(TEMPLATES_DIR)]
        if templates_dir is not None:
            search_path.insert(0, str(templates_dir))

        self._env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
        self._env.filters["markdown"] = markdown_to_html
        self._env.globals.update(site_title=site_title, base_url=base_url.rstrip("/"))

        self.excerpt_length = excerpt_length
        self.excerpt_separator = excerpt_separator

    def render_excerpt(self, post: Post) -> str:
        """Listing fragment: the title linked to the post url, then its excerpt."""
        excerpt = excerpt_for(post, self.excerpt_length, self.excerpt_separator)
        return self._env.get_template("_excerpt.html").render(post=post, excerpt=excerpt)

    def render_archive(self, posts: Sequence[Post]) -> str:
        """Flat list with one link per post, in the order given."""
        return self._env.get_template("_archive_list.html").render(posts=posts)

    def render_index_page(self, paginator: Paginator | None) -> str:
        """Index page for one Paginator.

        ``None`` renders the page shell without a listing section, which is
        what a build with no posts produces.
        """
        excerpts = [self.render_excerpt(post) for post in paginator.posts] if paginator else []
        return self._env.get_template("index.html").render(paginator=paginator, excerpts=excerpts)

    def render_archive_page(self, posts: Sequence[Post]) -> str:
        return self._env.get_template("archive.html").render(archive=self.render_archive(posts))

    def render_post_page(self, post: Post) -> str:
        return self._env.get_template("post.html").render(post=post)
