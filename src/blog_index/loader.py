"""Discovery and parsing of post documents on disk.

Posts live in a ``_posts`` folder (or directly in the content directory)
as ``YYYY-MM-DD-slug.md`` files. Each file starts with a YAML front matter
block delimited by ``---`` lines, followed by the markdown body.
"""

import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from blog_index.exceptions import ContentError
from blog_index.models import Post

logger = logging.getLogger(__name__)

POSTS_FOLDER = "_posts"
POST_SUFFIXES = (".md", ".markdown")
FILENAME_PATTERN = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)$")
FRONT_MATTER_DELIMITER = "---"


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a document into its front matter mapping and body.

    Args:
        text: Full document text.

    Returns:
        Tuple of (metadata, body). Documents without front matter yield
        an empty mapping and the whole text as body.

    Raises:
        ValueError: If the front matter is unterminated, is not valid YAML,
            or is not a mapping.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            break
    else:
        raise ValueError("front matter is not terminated")

    try:
        meta = yaml.safe_load("".join(lines[1:end]))
    except yaml.YAMLError as e:
        raise ValueError(f"invalid front matter: {e}") from e

    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise ValueError("front matter must be a mapping")

    return meta, "".join(lines[end + 1 :]).lstrip("\n")


def _to_datetime(value: Any) -> datetime:
    """Datetime as written by the author, keeping any UTC offset."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise ValueError(f"unsupported date value {value!r}")


def _to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _to_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, list):
        return tuple(str(tag) for tag in value)
    raise ValueError("tags must be a list or a space-separated string")


def post_url(publish_date: datetime, slug: str) -> str:
    """Permanent url of a post, e.g. ``/2024/03/15/hello-world.html``.

    The date parts come from the author's own clock, so a post dated
    shortly after local midnight keeps that calendar day.
    """
    return f"/{publish_date:%Y/%m/%d}/{slug}.html"


def parse_post(path: Path) -> Post | None:
    """Parse one post document.

    Args:
        path: Path to a ``YYYY-MM-DD-slug`` markdown file.

    Returns:
        The Post, or None when the document is marked ``published: false``.

    Raises:
        ContentError: If the filename, front matter, or a required field is
            malformed.
    """
    match = FILENAME_PATTERN.match(path.stem)
    if match is None:
        raise ContentError("filename must look like YYYY-MM-DD-slug.md", path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"cannot read document: {e}", path) from e

    try:
        meta, body = split_front_matter(text)
    except ValueError as e:
        raise ContentError(str(e), path) from e

    if meta.get("published") is False:
        logger.info("Skipping unpublished post %s", path.name)
        return None

    title = meta.get("title")
    if title is None or not str(title).strip():
        raise ContentError("missing required field 'title'", path)

    try:
        local_date = _to_datetime(meta.get("date", match.group("date")))
        tags = _to_tags(meta.get("tags"))
    except ValueError as e:
        raise ContentError(str(e), path) from e

    slug = str(meta.get("slug") or match.group("slug"))
    excerpt = meta.get("excerpt")

    return Post(
        title=str(title).strip(),
        url=post_url(local_date, slug),
        publish_date=_to_utc_naive(local_date),
        body=body,
        excerpt=None if excerpt is None else str(excerpt),
        slug=slug,
        tags=tags,
    )


def discover(content_dir: Path | str) -> list[Path]:
    """List post documents under ``content_dir`` in filename order."""
    root = Path(content_dir)
    if not root.is_dir():
        raise ContentError("content directory does not exist", root)

    posts_dir = root / POSTS_FOLDER
    if not posts_dir.is_dir():
        posts_dir = root

    return sorted(p for p in posts_dir.iterdir() if p.is_file() and p.suffix in POST_SUFFIXES)


def load_posts(content_dir: Path | str) -> list[Post]:
    """Load every published post under ``content_dir``.

    Raises:
        ContentError: If the directory is missing or any document is malformed.
    """
    posts = []
    for path in discover(content_dir):
        post = parse_post(path)
        if post is not None:
            posts.append(post)
    return posts
