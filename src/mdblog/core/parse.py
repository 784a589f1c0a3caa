"""Post discovery and front-matter parsing"""

import logging
import re
from pathlib import Path

from pydantic import ValidationError

from mdblog.core.errors import DuplicateSlugError, FrontmatterError
from mdblog.core.models import Document, PostMetadata


logger = logging.getLogger(__name__)

DELIMITER = '---'
MD_EXTENSIONS = {'.md', '.mdx'}
QUOTED_RE = re.compile(r'^([\'"])(.*)\1$', re.DOTALL)


def _unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    m = QUOTED_RE.match(value)
    return m.group(2) if m else value


def _parse_metadata_lines(lines: list[str], path: Path | None = None) -> dict[str, str]:
    """Parse `key: value` lines; only the first colon separates key from value."""
    frontmatter: dict[str, str] = {}
    for lineno, line in enumerate(lines, start=2):
        if not line.strip():
            continue
        key, sep, value = line.partition(':')
        key = key.strip()
        if not sep or not key:
            raise FrontmatterError(path, f"line {lineno}: expected 'key: value', got {line.strip()!r}")
        if key in frontmatter:
            raise FrontmatterError(path, f"line {lineno}: duplicate key {key!r}")
        frontmatter[key] = _unquote(value.strip())
    return frontmatter


def split_frontmatter(text: str, path: Path | None = None) -> tuple[dict[str, str], str]:
    """Return (frontmatter, body) split on the first two delimiter lines.

    Raises FrontmatterError when either delimiter is missing or a metadata
    line is malformed.
    """
    lines = text.lstrip('\ufeff').splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        raise FrontmatterError(path, "missing opening '---' delimiter")

    for end in range(1, len(lines)):
        if lines[end].strip() == DELIMITER:
            break
    else:
        raise FrontmatterError(path, "missing closing '---' delimiter")

    frontmatter = _parse_metadata_lines([line.rstrip('\r\n') for line in lines[1:end]], path)
    return frontmatter, ''.join(lines[end + 1:])


def _quote(value: str) -> str:
    """Wrap values that would not survive _unquote and line stripping."""
    if _unquote(value) != value or value != value.strip():
        return f'"{value}"'
    return value


def format_frontmatter(frontmatter: dict[str, str]) -> str:
    """Serialize key/value pairs back into a delimited metadata block."""
    body = ''.join(f"{key}: {_quote(value)}\n" for key, value in frontmatter.items())
    return f"{DELIMITER}\n{body}{DELIMITER}\n"


def discover_files(posts_dir: Path) -> list[Path]:
    """Return .md/.mdx files directly inside posts_dir, sorted by name."""
    return sorted(p for p in posts_dir.iterdir() if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> Document:
    """Parse a single post file into a Document; slug is the file stem."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = split_frontmatter(raw, path)
    try:
        metadata = PostMetadata.model_validate(frontmatter)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise FrontmatterError(path, f"invalid metadata ({fields}): {e}") from e
    logger.debug("Parsed %s (publishedAt=%s)", path, metadata.published_at)
    return Document(
        slug=path.stem,
        path=path,
        frontmatter=frontmatter,
        metadata=metadata,
        body=body,
    )


def parse_dir(posts_dir: Path) -> list[Document]:
    """Parse every post in posts_dir in discovery order; slugs must be unique."""
    docs: list[Document] = []
    seen: dict[str, Path] = {}
    for p in discover_files(posts_dir):
        doc = parse_file(p)
        if doc.slug in seen:
            raise DuplicateSlugError(doc.slug, seen[doc.slug], p)
        seen[doc.slug] = p
        docs.append(doc)
    logger.debug("Read %d post(s) from %s", len(docs), posts_dir)
    return docs
