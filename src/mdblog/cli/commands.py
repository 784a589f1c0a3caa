"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.build import run_build
from mdblog.core.errors import MdblogError
from mdblog.core.posts import get_blog_posts, get_post
from mdblog.core.render import SiteRenderer


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


PostsDirOption = Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of post files")]


def build_cmd(
    posts: PostsDirOption = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Render the home page, blog index, every post, sitemap and feed."""
    settings = _settings(overrides={"posts_dir": posts, "output_dir": out})
    output_dir = Path(settings.output_dir)
    try:
        written = run_build(Path(settings.posts_dir), output_dir, SiteRenderer(settings))
    except MdblogError as e:
        _fail("Invalid post", e)
    except (ValueError, OSError) as e:
        _fail("Build failed", e)
    for path in written:
        typer.echo(f"  {path}")
    typer.echo(f"Built {len(written)} file(s) in {output_dir}/")


def list_cmd(posts: PostsDirOption = None):
    """List posts newest first: date, slug and title."""
    settings = _settings(overrides={"posts_dir": posts})
    try:
        docs = get_blog_posts(Path(settings.posts_dir))
    except MdblogError as e:
        _fail("Invalid post", e)
    except OSError as e:
        _fail("Could not read posts", e)
    if not docs:
        typer.echo(f"No posts found in {settings.posts_dir}/")
        raise typer.Exit(1)
    for doc in docs:
        typer.echo(f"{doc.published_at.isoformat()}  {doc.slug}  {doc.metadata.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the post to render")],
    posts: PostsDirOption = None,
    ):
    """Print the rendered HTML page for a single post."""
    settings = _settings(overrides={"posts_dir": posts})
    try:
        doc = get_post(Path(settings.posts_dir), slug)
    except MdblogError as e:
        _fail("Invalid post", e)
    except OSError as e:
        _fail("Could not read posts", e)
    if doc is None:
        _fail(f"Post not found: {slug}")
    typer.echo(SiteRenderer(settings).render_post(doc))
