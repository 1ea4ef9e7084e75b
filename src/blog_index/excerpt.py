"""Excerpt derivation for listing pages."""

import re

from blog_index.models import Post

DEFAULT_EXCERPT_LENGTH = 300
DEFAULT_EXCERPT_SEPARATOR = "\n\n"

_WHITESPACE = re.compile(r"\s")
_TAG = re.compile(
    r"<!--.*?-->|<![^>]*>|<(?P<close>/)?(?P<name>[A-Za-z][\w:-]*)[^>]*?(?P<self_closing>/)?>",
    re.DOTALL,
)
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def _cut_points(text: str) -> list[int]:
    """Offsets of whitespace where no markup tag or element is open.

    A ``<`` only starts a tag when a tag name, ``/`` or ``!`` follows it, so
    prose such as ``x < 5`` still has word boundaries.
    """
    points = []
    depth = 0
    pos = 0
    for match in _TAG.finditer(text):
        if depth == 0:
            points.extend(m.start() for m in _WHITESPACE.finditer(text, pos, match.start()))
        pos = match.end()

        name = match.group("name")
        if name is None or match.group("self_closing") or name.lower() in VOID_ELEMENTS:
            continue
        if match.group("close"):
            depth = max(depth - 1, 0)
        else:
            depth += 1

    if depth == 0:
        points.extend(m.start() for m in _WHITESPACE.finditer(text, pos))
    return points


def derive_excerpt(
    body: str,
    max_length: int = DEFAULT_EXCERPT_LENGTH,
    separator: str | None = DEFAULT_EXCERPT_SEPARATOR,
) -> str:
    """Return a prefix of ``body`` suitable as a listing excerpt.

    The text before the first ``separator`` is used when present. The
    result is at most ``max_length`` characters and ends on a word
    boundary. It never stops inside a word or a markup tag, and never
    leaves an element open.

    Args:
        body: Post body (markdown source).
        max_length: Upper bound on the excerpt length.
        separator: Marks the end of the excerpt when found in body.

    Returns:
        The excerpt, with trailing whitespace removed.
    """
    if separator and separator in body:
        body = body.split(separator, 1)[0]
    body = body.rstrip()

    if len(body) <= max_length:
        return body

    candidates = [i for i in _cut_points(body) if i <= max_length]
    if not candidates:
        return ""
    return body[: candidates[-1]].rstrip()


def excerpt_for(
    post: Post,
    max_length: int = DEFAULT_EXCERPT_LENGTH,
    separator: str | None = DEFAULT_EXCERPT_SEPARATOR,
) -> str:
    """The post's authored excerpt verbatim, otherwise one derived from its body."""
    if post.excerpt is not None:
        return post.excerpt
    return derive_excerpt(post.body, max_length, separator)
