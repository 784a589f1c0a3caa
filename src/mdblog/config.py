"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    site_title:       str = "gitpu.sh"
    site_description: str = "Azure | IaC | DevOps | Kubernetes | Linux"
    base_url:         str = Field(default="https://gitpu.sh", description="Absolute site URL, no trailing slash")
    posts_dir:        str = Field(default="posts",   description="Directory holding .md/.mdx post files")
    output_dir:       str = Field(default="dist",    description="Directory for the generated site")
    parser_config:    str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    default_image:    str = Field(default="/og.png", description="Social card image for posts without one")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in path, {} when it is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Collect non-empty MDBLOG_<FIELD> environment variables."""
    values = {name: os.getenv(f"MDBLOG_{name.upper()}") for name in Settings.model_fields}
    return {k: v for k, v in values.items() if v}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Layer config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data = _read_config_file(Path(CONFIG_FILE))
    data.update(_env_values())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings.model_validate(data)
