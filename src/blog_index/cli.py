"""Command-line interface for the blog index build."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from blog_index.config import Config
from blog_index.exceptions import ContentError, InvalidConfiguration, OutputError
from blog_index.orchestrator import build
from blog_index.renderer import SiteRenderer
from blog_index.store import ContentStore
from blog_index.writer import SiteWriter


@click.command()
@click.argument("content_dir", type=click.Path(path_type=Path))
@click.option("--output-dir", type=click.Path(path_type=Path), help="Folder to write the site into.")
@click.option("--page-size", type=int, help="Posts per index page (0 disables pagination).")
@click.option("--no-paginate", is_flag=True, help="List every post on a single index page.")
@click.option("-v", "--verbose", is_flag=True, help="Log every file written.")
def main(
    content_dir: Path,
    output_dir: Path | None,
    page_size: int | None,
    no_paginate: bool,
    verbose: bool,
) -> None:
    """Build the blog index, archive and post pages.

    CONTENT_DIR: Folder holding the post documents (or a _posts folder).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {"content_dir": content_dir}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if page_size is not None:
        overrides["page_size"] = page_size
    if no_paginate:
        overrides["paginate"] = False

    try:
        config = Config(**overrides)
    except ValidationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        store = ContentStore.from_directory(config.content_dir)
        renderer = SiteRenderer(
            site_title=config.site_title,
            base_url=config.base_url,
            templates_dir=config.templates_dir,
            excerpt_length=config.excerpt_length,
            excerpt_separator=config.excerpt_separator,
        )
        writer = SiteWriter(config.output_dir)

        result = build(
            store=store,
            pagination=config.pagination(),
            renderer=renderer,
            writer=writer,
        )

        click.echo(f"Found {result['posts_found']} posts in {config.content_dir}")
        click.echo(
            f"Wrote {result['index_pages_written']} index pages, "
            f"{result['archive_pages_written']} archive page and "
            f"{result['post_pages_written']} post pages to {config.output_dir}"
        )

    except ContentError as e:
        click.echo(f"Content error: {e}", err=True)
        sys.exit(1)

    except InvalidConfiguration as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    except OutputError as e:
        click.echo(f"Writing failed: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
