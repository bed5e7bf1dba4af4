"""Markdown-to-HTML compilation of a single article"""

from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.anchors import anchors_plugin

from microblog.core.models import CompiledDocument
from microblog.core.title import find_first_heading, heading_text
from microblog.core.utils.fs import strip_markdown_suffix
from microblog.core.utils.slug import slugify
from microblog.errors import ReadError


def make_parser() -> MarkdownIt:
    """GFM-like parser (tables, strikethrough, linkify) with id anchors on every heading."""
    return MarkdownIt('gfm-like').use(anchors_plugin, min_level=1, max_level=6, slug_func=slugify)


def compile_markdown(text: str, fallback_title: str, md: MarkdownIt = None) -> CompiledDocument:
    """Parse text once; take the title from the tree and render HTML from the same tokens."""
    md = md or make_parser()
    env: dict = {}
    tokens = md.parse(text, env)

    heading = find_first_heading(SyntaxTreeNode(tokens))
    title = heading_text(heading) if heading is not None else fallback_title

    html = md.renderer.render(tokens, md.options, env)
    return CompiledDocument(title=title, html=html)


def compile_document(input_path: Path, md: MarkdownIt = None) -> CompiledDocument:
    """Compile a markdown file into (title, html fragment). Raises ReadError if unreadable."""
    try:
        raw = input_path.read_bytes()
    except OSError as e:
        raise ReadError(input_path, e) from e
    return compile_markdown(
        raw.decode('utf-8', errors='replace'),
        strip_markdown_suffix(input_path.name),
        md,
    )
