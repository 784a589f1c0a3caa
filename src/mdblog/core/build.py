"""Site build: render every route and write the static output tree"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from mdblog.core.posts import get_blog_posts, get_post
from mdblog.core.render import SiteRenderer


logger = logging.getLogger(__name__)


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    logger.info("Wrote %s", path)
    return path


def _clean_output_dir(output_dir: Path, posts_dir: Path) -> None:
    """Remove a previous build so deleted or renamed posts leave no pages behind."""
    if posts_dir.resolve().is_relative_to(output_dir.resolve()):
        raise ValueError(f"Output directory {output_dir} contains the posts directory {posts_dir}")
    if output_dir.exists():
        shutil.rmtree(output_dir)
        logger.info("Removed previous build in %s", output_dir)


def render_page(posts_dir: Path, route: str, renderer: SiteRenderer) -> Optional[str]:
    """Render one route ('/', '/blog' or '/blog/<slug>'). Returns None if it does not exist."""
    parts = [p for p in route.split('/') if p]
    if not parts:
        return renderer.render_home(get_blog_posts(posts_dir))
    if parts == ['blog']:
        return renderer.render_blog_index(get_blog_posts(posts_dir))
    if len(parts) == 2 and parts[0] == 'blog':
        post = get_post(posts_dir, parts[1])
        if post is None:
            logger.info("No post for slug %r", parts[1])
            return None
        return renderer.render_post(post)
    return None


def run_build(posts_dir: Path, output_dir: Path, renderer: SiteRenderer) -> list[Path]:
    """Read the post list once and write every page of the site under output_dir.

    Layout:
      index.html, blog/index.html, blog/<slug>/index.html,
      404.html, sitemap.xml, rss.xml

    Any previous build in output_dir is removed first.
    Returns the written paths in write order.
    """
    posts = get_blog_posts(posts_dir)
    _clean_output_dir(output_dir, posts_dir)
    written = [
        _write(output_dir / 'index.html', renderer.render_home(posts)),
        _write(output_dir / 'blog' / 'index.html', renderer.render_blog_index(posts)),
    ]
    for post in posts:
        written.append(_write(output_dir / 'blog' / post.slug / 'index.html', renderer.render_post(post)))
    written += [
        _write(output_dir / '404.html', renderer.render_not_found()),
        _write(output_dir / 'sitemap.xml', renderer.render_sitemap(posts)),
        _write(output_dir / 'rss.xml', renderer.render_feed(posts)),
    ]
    return written
