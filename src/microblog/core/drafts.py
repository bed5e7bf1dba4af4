"""Draft promotion: move drafts into the article directory under a timestamped name"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from microblog.core.utils.fs import is_markdown, list_dir
from microblog.errors import PromoteError


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def promoted_name(name: str, mtime: float) -> str:
    """'hello.md' modified 2024-03-05 14:22:01 UTC -> '20240305-142201--hello.md'"""
    stamp = datetime.fromtimestamp(mtime, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)
    return f"{stamp}--{name}"


def promote_draft(draft: Path, articles_dir: Path) -> Path:
    """Rename one draft into articles_dir. An existing article of the same name is replaced."""
    try:
        target = articles_dir / promoted_name(draft.name, draft.stat().st_mtime)
        draft.replace(target)
    except OSError as e:
        raise PromoteError(draft, e) from e
    return target


def promote_drafts(drafts_dir: Path, articles_dir: Path) -> list[tuple[Path, Path]]:
    """Promote every markdown draft. Returns (draft, article) pairs for the files moved.

    Raises DirectoryListError if drafts_dir can not be listed. Non-markdown
    entries and drafts that fail to move are logged and left in place.
    """
    promoted = []
    for draft in list_dir(drafts_dir):
        if not is_markdown(draft.name):
            logger.warning("skip non-markdown file in draft: %r", draft.name)
            continue
        try:
            target = promote_draft(draft, articles_dir)
        except PromoteError as e:
            logger.error("%s", e)
            continue
        logger.debug("promoted %s -> %s", draft, target)
        promoted.append((draft, target))
    return promoted
