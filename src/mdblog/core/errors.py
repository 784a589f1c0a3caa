"""Input-contract errors raised while reading the post store"""

from pathlib import Path


class MdblogError(ValueError):
    """Base class for authored-content errors."""


class FrontmatterError(MdblogError):
    """A post file has a missing or malformed metadata block."""

    def __init__(self, path: Path | None, message: str):
        self.path = path
        prefix = f"{path}: " if path is not None else ""
        super().__init__(f"{prefix}{message}")


class DuplicateSlugError(MdblogError):
    """Two post files map to the same slug."""

    def __init__(self, slug: str, first: Path, second: Path):
        self.slug = slug
        self.paths = (first, second)
        super().__init__(f"Duplicate slug '{slug}': {first} and {second}")
