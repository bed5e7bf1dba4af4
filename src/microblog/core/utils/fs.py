"""Directory listing and markdown file naming helpers"""

from pathlib import Path

from microblog.errors import DirectoryListError


MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def list_dir(directory: Path) -> list[Path]:
    """Return the entries of directory in the order the filesystem lists them.

    Raises DirectoryListError if the directory can not be read.
    """
    try:
        return list(directory.iterdir())
    except OSError as e:
        raise DirectoryListError(directory, e) from e


def is_markdown(name: str) -> bool:
    return name.endswith(MARKDOWN_SUFFIX)


def strip_markdown_suffix(name: str) -> str:
    return name[:-len(MARKDOWN_SUFFIX)] if is_markdown(name) else name


def html_name(name: str) -> str:
    """'post.md' -> 'post.html'"""
    return strip_markdown_suffix(name) + HTML_SUFFIX
