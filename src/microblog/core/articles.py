"""Article processing: compile every article into a page and collect the registry"""

import logging
from pathlib import Path

from jinja2 import Template, TemplateError
from markdown_it import MarkdownIt
from markupsafe import Markup

from microblog.core.compile import compile_document, make_parser
from microblog.core.models import ArticleEntry, CompiledDocument
from microblog.core.utils.fs import html_name, is_markdown, list_dir
from microblog.errors import ItemError, WriteError


logger = logging.getLogger(__name__)


def write_page(output_path: Path, doc: CompiledDocument, template: Template) -> None:
    """Render doc through the article template into output_path (created or truncated).

    Raises WriteError if the file can not be opened or written; a failed write
    may leave a partial page behind.
    """
    try:
        with output_path.open("w", encoding="utf-8") as fout:
            template.stream(title=doc.title, content=Markup(doc.html)).dump(fout)
    except (OSError, TemplateError) as e:
        raise WriteError(output_path, e) from e


def process_article(
    input_path: Path,
    output_dir: Path,
    templates: dict[str, Template],
    md: MarkdownIt = None,
    ) -> ArticleEntry:
    """Compile and write one article. Raises ReadError or WriteError."""
    output_filename = html_name(input_path.name)
    doc = compile_document(input_path, md)
    write_page(output_dir / output_filename, doc, templates["article"])
    return ArticleEntry(title=doc.title, url=output_filename)


def process_articles(
    articles_dir: Path,
    output_dir: Path,
    templates: dict[str, Template],
    md: MarkdownIt = None,
    ) -> list[ArticleEntry]:
    """Compile every markdown file in articles_dir into output_dir.

    Returns the registry in directory listing order. Raises DirectoryListError
    if articles_dir can not be listed; a file that fails is logged and left
    out of the registry.
    """
    md = md or make_parser()
    registry = []
    for input_path in list_dir(articles_dir):
        if not is_markdown(input_path.name):
            logger.warning("skip non-markdown file in article: %r", input_path.name)
            continue
        try:
            entry = process_article(input_path, output_dir, templates, md)
        except ItemError as e:
            logger.error("%s", e)
            continue
        logger.info("generated %s", output_dir / entry.url)
        registry.append(entry)
    return registry
