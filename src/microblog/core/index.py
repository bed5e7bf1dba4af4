"""Index page: header, a link per article, footer"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Template, TemplateError

from microblog.core.models import ArticleEntry


logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"
DEFAULT_SITE_TITLE = "microblog"


def build_index(
    output_dir: Path,
    registry: list[ArticleEntry],
    templates: dict[str, Template],
    site_title: str = DEFAULT_SITE_TITLE,
    ) -> Optional[Path]:
    """Write output_dir/index.html listing registry in order. Returns None if it can not be written."""
    output_path = output_dir / INDEX_FILENAME
    try:
        with output_path.open("w", encoding="utf-8") as fout:
            templates["header"].stream(title=site_title).dump(fout)
            templates["list"].stream(entries=registry).dump(fout)
            templates["footer"].stream(title=site_title).dump(fout)
    except (OSError, TemplateError) as e:
        logger.error("can not write output file %r: %s", str(output_path), e)
        return None
    logger.info("generated %s", output_path)
    return output_path
