"""Data models for parsed blog posts"""

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class PostMetadata(BaseModel):
    """Validated front matter of a post; unknown keys are kept as extras."""
    model_config = ConfigDict(extra="allow", frozen=True)

    title:        str
    published_at: date = Field(alias="publishedAt")
    summary:      str
    image:        Optional[str] = None

    @field_validator("published_at", mode="before")
    @classmethod
    def check_published_at(cls, value):
        """Accept only YYYY-MM-DD strings; it is the sole sort key."""
        if not isinstance(value, str) or not ISO_DATE_RE.fullmatch(value):
            raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
        return date.fromisoformat(value)


@dataclass(frozen=True)
class Document:
    """One blog post as read from disk; re-read on every store access."""
    slug:        str
    path:        Path
    frontmatter: dict[str, str]     # raw key/value pairs in file order
    metadata:    PostMetadata
    body:        str                # text after the closing delimiter

    @property
    def published_at(self) -> date:
        return self.metadata.published_at
