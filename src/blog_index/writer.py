"""Writes rendered pages into the output directory."""

import logging
from pathlib import Path

from blog_index.exceptions import OutputError

logger = logging.getLogger(__name__)


class SiteWriter:
    """Maps site urls to files under an output directory and writes them."""

    def __init__(self, output_dir: Path | str) -> None:
        """Initialize the writer.

        Args:
            output_dir: Root folder of the generated site. Created on first write.

        Raises:
            ValueError: If output_dir is empty or whitespace.
        """
        if not str(output_dir).strip():
            raise ValueError("Output directory must not be empty or whitespace")

        self.output_dir = Path(output_dir)

    def path_for(self, url: str) -> Path:
        """File path for a site url.

        Urls ending in ``/`` map to an ``index.html`` inside that folder.

        Raises:
            OutputError: If the url would resolve outside the output directory.
        """
        relative = url.lstrip("/")
        if not relative or relative.endswith("/"):
            relative += "index.html"

        root = self.output_dir.resolve()
        path = (root / relative).resolve()
        if not path.is_relative_to(root):
            raise OutputError(f"Url {url!r} resolves outside the output directory")
        return path

    def write(self, url: str, html: str) -> Path:
        """Write one page.

        Args:
            url: Site url of the page, e.g. ``/page2/`` or ``/archive.html``.
            html: Rendered page.

        Returns:
            The path written.

        Raises:
            OutputError: If the file cannot be written.
        """
        path = self.path_for(url)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(html, encoding="utf-8")
        except OSError as e:
            raise OutputError(f"Failed to write {path}: {e}", path=path, original_error=e) from e

        logger.debug("Wrote %s", path)
        return path
