"""Markdown-to-HTML rendering for post bodies"""

from markdown_it import MarkdownIt


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_markdown(text: str, preset: str = 'gfm-like') -> str:
    """Render a markdown body to an HTML fragment."""
    return _make_parser(preset).render(text)
