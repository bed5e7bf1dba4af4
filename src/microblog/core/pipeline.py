"""Build driver: directories, templates, then promote -> articles -> index"""

import logging
from pathlib import Path

from microblog.config import Settings
from microblog.core.articles import process_articles
from microblog.core.drafts import promote_drafts
from microblog.core.index import build_index
from microblog.core.models import BuildResult
from microblog.core.templates import load_templates
from microblog.errors import DirectoryCreateError


logger = logging.getLogger(__name__)


def site_dirs(settings: Settings) -> tuple[Path, Path, Path]:
    """(draft, article, publish) directories from settings."""
    return Path(settings.draft_dir), Path(settings.article_dir), Path(settings.publish_dir)


def ensure_dirs(settings: Settings) -> tuple[Path, Path, Path]:
    """Create any missing site directory; existing ones are left alone."""
    dirs = site_dirs(settings)
    for d in dirs:
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(d, e) from e
    return dirs


def run(settings: Settings = None) -> BuildResult:
    """Run the whole build. Raises FatalBuildError subclasses on unrecoverable failures."""
    settings = settings or Settings()
    draft_dir, article_dir, publish_dir = ensure_dirs(settings)

    template_dir = Path(settings.template_dir) if settings.template_dir else None
    templates = load_templates(template_dir)

    promoted = promote_drafts(draft_dir, article_dir)
    registry = process_articles(article_dir, publish_dir, templates)
    index_path = build_index(publish_dir, registry, templates, settings.site_title)

    logger.debug("build finished: %d promoted, %d articles", len(promoted), len(registry))
    return BuildResult(promoted=promoted, articles=registry, index_path=index_path)
