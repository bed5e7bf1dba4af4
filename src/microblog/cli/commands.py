"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer

from microblog.config import Settings, load_config
from microblog.core.pipeline import ensure_dirs, run
from microblog.errors import FatalBuildError


LOG_FORMAT = "%(levelname)s: %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def build_cmd(
    draft: Annotated[Optional[str], typer.Option("--draft-dir", help="Drafts directory")] = None,
    article: Annotated[Optional[str], typer.Option("--article-dir", help="Articles directory")] = None,
    publish: Annotated[Optional[str], typer.Option("--publish-dir", help="Output directory")] = None,
    site_title: Annotated[Optional[str], typer.Option("--site-title", help="Title of the index page")] = None,
    template_dir: Annotated[Optional[str], typer.Option("--template-dir", help="Directory of templates overriding the built-in layout")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
    ):
    """Run the full pipeline: promote drafts -> compile articles -> write index."""
    _setup_logging(verbose, quiet)
    settings = _settings(overrides={
        "draft_dir": draft, "article_dir": article, "publish_dir": publish,
        "site_title": site_title, "template_dir": template_dir,
    })

    try:
        result = run(settings)
    except FatalBuildError as e:
        _fail("Build failed", e)

    index = result.index_path or "skipped"
    typer.echo(
        f"Build complete - "
        f"{len(result.promoted)} promoted, "
        f"{len(result.articles)} generated, "
        f"index: {index}"
    )


def init_cmd(
    draft: Annotated[Optional[str], typer.Option("--draft-dir", help="Drafts directory")] = None,
    article: Annotated[Optional[str], typer.Option("--article-dir", help="Articles directory")] = None,
    publish: Annotated[Optional[str], typer.Option("--publish-dir", help="Output directory")] = None,
    ):
    """Create the draft, article and publish directories."""
    settings = _settings(overrides={"draft_dir": draft, "article_dir": article, "publish_dir": publish})
    try:
        dirs = ensure_dirs(settings)
    except FatalBuildError as e:
        _fail("Could not create directories", e)
    for d in dirs:
        typer.echo(f"  {d}/")
