"""Post list provider: newest-first listing and slug lookup"""

from pathlib import Path
from typing import Optional

from mdblog.core.models import Document
from mdblog.core.parse import parse_dir


def sort_posts(docs: list[Document]) -> list[Document]:
    """Order by publishedAt, newest first; ties keep discovery order."""
    return sorted(docs, key=lambda d: d.published_at, reverse=True)


def get_blog_posts(posts_dir: Path) -> list[Document]:
    """Read the store and return every post, newest first."""
    return sort_posts(parse_dir(posts_dir))


def get_post(posts_dir: Path, slug: str) -> Optional[Document]:
    """Return the post with the given slug, or None when no such post exists."""
    return next((d for d in parse_dir(posts_dir) if d.slug == slug), None)
