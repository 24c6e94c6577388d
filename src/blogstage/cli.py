"""CLI interface for Blogstage.

Command-line tool for serving the blog and inspecting its posts.
"""

import logging
import sys
from pathlib import Path

import click

from blogstage.config import Config
from blogstage.core.catalog import default_catalog
from blogstage.core.renderer import render_safe


@click.group()
def cli() -> None:
    """Blogstage - a minimal personal blog."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--title",
    default=None,
    help="Site title shown in the header (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    title: str | None,
    verbose: bool,
) -> None:
    """Start the blog server."""
    from blogstage.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        site_title=title,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Site title: {config.site.title}")
    click.echo(f"Posts: {len(default_catalog())}")

    run_server(config)


@cli.command()
def posts() -> None:
    """List the posts in the catalog."""
    for post in default_catalog():
        date = post.date or "-"
        click.echo(f"{post.slug}\t{date}\t{post.title}")


@cli.command()
@click.argument("slug", required=False)
@click.option(
    "--file",
    "-f",
    "markdown_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Render a markdown file instead of a catalog post",
)
def render(slug: str | None, markdown_file: Path | None) -> None:
    """Print the sanitized HTML of a post.

    Unknown slugs print the "Post not found." fallback.
    """
    if (slug is None) == (markdown_file is None):
        raise click.UsageError("Provide either SLUG or --file")

    if markdown_file is not None:
        markdown_text = markdown_file.read_text(encoding="utf-8")
    else:
        markdown_text = default_catalog().resolve(slug).body

    click.echo(render_safe(markdown_text), nl=False)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, exiting with an error message on failure."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


if __name__ == "__main__":
    cli()
