"""Page renderers: home, blog index, single post, plus sitemap and feed"""

import json
from datetime import date
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from mdblog.config import Settings
from mdblog.core.models import Document
from mdblog.core.utils.dates import format_date
from mdblog.core.utils.markdown import render_markdown


TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def _rfc822(value: date) -> str:
    """Format a date as an RSS pubDate (midnight UTC)."""
    return f"{value:%a, %d %b %Y} 00:00:00 GMT"


class SiteRenderer:
    """Renders site pages from Jinja2 templates bundled with the package.

    Every method takes already-loaded posts and returns markup as a string;
    none of them touches the post store.
    """

    def __init__(self, settings: Settings, template_dir: Path | None = None) -> None:
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_date"] = format_date
        self.env.filters["rfc822"] = _rfc822
        self.env.globals["site"] = settings
        self.env.globals["base_url"] = self.base_url

    def _render(self, name: str, **context) -> str:
        return self.env.get_template(name).render(**context)

    def post_url(self, post: Document) -> str:
        return f"{self.base_url}/blog/{quote(post.slug)}"

    def _post_image(self, post: Document) -> str:
        image = post.metadata.image or self.settings.default_image
        if image.startswith(("http://", "https://")):
            return image
        return f"{self.base_url}/{image.lstrip('/')}"

    def _json_ld(self, post: Document, image: str) -> Markup:
        data = {
            "@context": "https://schema.org",
            "@type": "BlogPosting",
            "headline": post.metadata.title,
            "datePublished": post.published_at.isoformat(),
            "dateModified": post.published_at.isoformat(),
            "description": post.metadata.summary,
            "image": image,
            "url": self.post_url(post),
            "author": {"@type": "Person", "name": self.settings.site_title},
        }
        # Escape '<' so a summary cannot close the script element.
        return Markup(json.dumps(data).replace("<", "\\u003c"))

    def render_home(self, posts: list[Document]) -> str:
        return self._render("home.html", posts=posts)

    def render_blog_index(self, posts: list[Document]) -> str:
        return self._render("blog.html", title="blog", description="blog", posts=posts)

    def render_post(self, post: Document) -> str:
        image = self._post_image(post)
        return self._render(
            "post.html",
            title=post.metadata.title,
            description=post.metadata.summary,
            post=post,
            url=self.post_url(post),
            image=image,
            json_ld=self._json_ld(post, image),
            content=Markup(render_markdown(post.body, self.settings.parser_config)),
        )

    def render_not_found(self) -> str:
        return self._render("404.html", title="404")

    def render_sitemap(self, posts: list[Document]) -> str:
        today = date.today().isoformat()
        entries = [(self.base_url, today), (f"{self.base_url}/blog", today)]
        entries += [(self.post_url(p), p.published_at.isoformat()) for p in posts]
        return self._render("sitemap.xml", entries=entries)

    def render_feed(self, posts: list[Document]) -> str:
        return self._render("rss.xml", posts=posts, post_url=self.post_url)
