"""Data passed between pipeline stages"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class ArticleEntry(BaseModel):
    """One compiled article as listed on the index page."""
    title: str
    url:   str          # output filename, relative to the publish directory


@dataclass
class CompiledDocument:
    """Result of compiling one markdown file; nothing is written yet."""
    title: str
    html:  str          # rendered fragment, trusted markup


@dataclass
class BuildResult:
    promoted:   list[tuple[Path, Path]] = field(default_factory=list)   # (draft, article) renames
    articles:   list[ArticleEntry] = field(default_factory=list)        # registry, listing order
    index_path: Optional[Path] = None                                   # None if the index was skipped
