"""Integration tests for the site build: posts directory -> static output tree"""

import pytest

from mdblog.config import Settings
from mdblog.core.build import render_page, run_build
from mdblog.core.errors import FrontmatterError
from mdblog.core.render import SiteRenderer


@pytest.fixture(name="renderer")
def renderer_fixture():
    return SiteRenderer(Settings())


@pytest.fixture(name="site_posts")
def site_posts_fixture(write_post, posts_dir):
    write_post("intro", "Intro", "2024-01-01")
    write_post("aks-terraform", "AKS with Terraform", "2025-07-30", body="Use `terraform apply`.\n")
    write_post("linux-tips", "Linux tips", "2023-05-05")
    return posts_dir


def test_run_build_writes_every_route(site_posts, tmp_path, renderer):
    out = tmp_path / "dist"
    written = run_build(site_posts, out, renderer)
    rel = {p.relative_to(out).as_posix() for p in written}
    assert rel == {
        "index.html",
        "blog/index.html",
        "blog/aks-terraform/index.html",
        "blog/intro/index.html",
        "blog/linux-tips/index.html",
        "404.html",
        "sitemap.xml",
        "rss.xml",
    }
    post_html = (out / "blog" / "aks-terraform" / "index.html").read_text(encoding="utf-8")
    assert "<code>terraform apply</code>" in post_html


def test_run_build_index_order(site_posts, tmp_path, renderer):
    out = tmp_path / "dist"
    run_build(site_posts, out, renderer)
    html = (out / "blog" / "index.html").read_text(encoding="utf-8")
    positions = [html.index(f'href="/blog/{slug}"') for slug in ("aks-terraform", "intro", "linux-tips")]
    assert positions == sorted(positions)


def test_run_build_fails_fast_on_malformed_post(site_posts, tmp_path, renderer):
    (site_posts / "broken.mdx").write_text("---\ntitle: Broken\nno closing delimiter\n")
    out = tmp_path / "dist"
    with pytest.raises(FrontmatterError):
        run_build(site_posts, out, renderer)
    assert not out.exists()


@pytest.mark.parametrize("route", ["/", "", "/blog", "/blog/", "/blog/intro"])
def test_render_page_known_routes(site_posts, renderer, route):
    assert render_page(site_posts, route, renderer) is not None


@pytest.mark.parametrize("route", ["/blog/nope", "/about", "/blog/intro/extra"])
def test_render_page_not_found(site_posts, renderer, route):
    assert render_page(site_posts, route, renderer) is None


def test_run_build_removes_stale_pages(site_posts, tmp_path, renderer):
    """A deleted post leaves no page behind after the next build."""
    out = tmp_path / "dist"
    run_build(site_posts, out, renderer)
    assert (out / "blog" / "intro" / "index.html").exists()

    (site_posts / "intro.mdx").unlink()
    run_build(site_posts, out, renderer)
    assert not (out / "blog" / "intro").exists()
    assert (out / "blog" / "linux-tips" / "index.html").exists()


def test_run_build_refuses_output_containing_posts(site_posts, renderer):
    """The output directory is cleared, so it may not hold the posts themselves."""
    with pytest.raises(ValueError, match="contains the posts directory"):
        run_build(site_posts, site_posts.parent, renderer)
    assert (site_posts / "intro.mdx").exists()


def test_run_build_is_reproducible(site_posts, tmp_path, renderer):
    """Post pages carry only the absolute publication date."""
    out = tmp_path / "dist"
    run_build(site_posts, out, renderer)
    html = (out / "blog" / "intro" / "index.html").read_text(encoding="utf-8")
    assert '<p class="date">January 1, 2024</p>' in html
    assert " ago)" not in html and "(Today)" not in html
