"""Shared fixtures for core unit tests"""

import pytest
from markdown_it.tree import SyntaxTreeNode

from microblog.core.compile import make_parser
from microblog.core.templates import load_templates


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

| a | b |
|---|---|
| 1 | 2 |
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="tree")
def tree_fixture(parser):
    """Build a document tree from markdown text."""
    def _tree(text: str) -> SyntaxTreeNode:
        return SyntaxTreeNode(parser.parse(text))
    return _tree


@pytest.fixture(name="templates")
def templates_fixture():
    return load_templates()


@pytest.fixture(name="site")
def site_fixture(tmp_path):
    """(draft, article, publish) directories under tmp_path."""
    dirs = tuple(tmp_path / name for name in ("draft", "article", "publish"))
    for d in dirs:
        d.mkdir()
    return dirs
