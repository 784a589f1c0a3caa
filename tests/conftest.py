"""Root test configuration: helpers for writing post files"""

from pathlib import Path

import pytest


def post_text(title: str, published_at: str, summary: str = "A summary.", body: str = "Body text.\n", **extra) -> str:
    """Build a post file with a delimited metadata block."""
    lines = [f"title: {title}", f"publishedAt: {published_at}", f"summary: {summary}"]
    lines += [f"{k}: {v}" for k, v in extra.items()]
    return "---\n" + "\n".join(lines) + "\n---\n\n" + body


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path) -> Path:
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(posts_dir):
    """Write <slug>.mdx into posts_dir and return its path."""
    def _write(slug: str, title: str, published_at: str, ext: str = ".mdx", **kwargs) -> Path:
        p = posts_dir / f"{slug}{ext}"
        p.write_text(post_text(title, published_at, **kwargs), encoding="utf-8")
        return p
    return _write


@pytest.fixture(name="post_text")
def post_text_fixture():
    return post_text
