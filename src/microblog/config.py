"""Application configuration: settings schema and microblog.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "microblog.yaml"


class Settings(BaseModel):
    site_title:   str = Field(default="microblog", min_length=1, description="Title of the index page")
    draft_dir:    str = Field(default="draft",   min_length=1, description="Drafts waiting for promotion")
    article_dir:  str = Field(default="article", min_length=1, description="Markdown articles to publish")
    publish_dir:  str = Field(default="publish", min_length=1, description="Generated HTML site")
    template_dir: Optional[str] = Field(default=None, description="Directory of templates overriding the built-in layout")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from microblog.yaml, then MICROBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MICROBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
