"""Integration tests for the promote -> articles -> index build.

Each test runs the whole pipeline from a clean working directory with the
default layout:

    draft/     markdown waiting for promotion
    article/   markdown to publish
    publish/   generated site (one .html per article + index.html)
"""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from microblog.config import Settings
from microblog.core.pipeline import ensure_dirs, run
from microblog.errors import DirectoryCreateError, DirectoryListError, TemplateLoadError


MTIME = datetime(2024, 3, 5, 14, 22, 1, tzinfo=timezone.utc).timestamp()


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so relative paths are isolated."""
    monkeypatch.chdir(tmp_path)


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in sorted(directory.iterdir())}


def test_run_creates_missing_dirs(tmp_path):
    result = run()
    for name in ("draft", "article", "publish"):
        assert (tmp_path / name).is_dir()
    assert result.articles == []
    assert result.index_path == Path("publish") / "index.html"


def test_run_with_existing_dirs(tmp_path):
    """Directories that already exist are not an error."""
    for name in ("draft", "article", "publish"):
        (tmp_path / name).mkdir()
    run()
    assert (tmp_path / "publish" / "index.html").is_file()


def test_promoted_draft_is_published_in_same_build(tmp_path):
    """A draft is promoted, compiled and listed on the index in a single run."""
    ensure_dirs(Settings())
    draft = tmp_path / "draft" / "hello.md"
    draft.write_text("# Hello there\n\nFirst post.\n")
    os.utime(draft, (MTIME, MTIME))

    result = run()

    assert not draft.exists()
    assert (tmp_path / "article" / "20240305-142201--hello.md").is_file()
    page = (tmp_path / "publish" / "20240305-142201--hello.html").read_text()
    assert "<title>Hello there</title>" in page
    index = (tmp_path / "publish" / "index.html").read_text()
    assert '<a href="20240305-142201--hello.html">Hello there</a>' in index
    assert len(result.promoted) == 1


def test_run_is_idempotent(tmp_path):
    """Two builds on unchanged input produce byte-identical output."""
    ensure_dirs(Settings())
    (tmp_path / "article" / "one.md").write_text("# One\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")
    (tmp_path / "article" / "two.md").write_text("no title, see https://example.com\n")

    run()
    first = _snapshot(tmp_path / "publish")
    run()
    second = _snapshot(tmp_path / "publish")

    assert first == second
    assert set(first) == {"one.html", "two.html", "index.html"}


def test_skipped_files_do_not_abort(tmp_path):
    ensure_dirs(Settings())
    (tmp_path / "draft" / "readme.txt").write_text("keep me")
    (tmp_path / "article" / "broken.md").write_text("# Broken\n")
    (tmp_path / "article" / "good.md").write_text("# Good\n")
    (tmp_path / "publish" / "broken.html").mkdir()

    result = run()

    assert (tmp_path / "draft" / "readme.txt").exists()
    assert [e.url for e in result.articles] == ["good.html"]
    assert "broken.html" not in (tmp_path / "publish" / "index.html").read_text()


def test_custom_settings(tmp_path):
    settings = Settings(article_dir="posts", publish_dir="site", site_title="Notes")
    (tmp_path / "posts").mkdir()
    (tmp_path / "posts" / "a.md").write_text("# A\n")

    run(settings)

    assert "<title>Notes</title>" in (tmp_path / "site" / "index.html").read_text()
    assert (tmp_path / "site" / "a.html").is_file()


def test_broken_template_aborts_before_promotion(tmp_path):
    """A template syntax error stops the build before any draft is moved."""
    (tmp_path / "tpl").mkdir()
    (tmp_path / "tpl" / "footer.html").write_text("{% endif %}")
    ensure_dirs(Settings())
    (tmp_path / "draft" / "wait.md").write_text("# Wait\n")

    with pytest.raises(TemplateLoadError):
        run(Settings(template_dir="tpl"))

    assert (tmp_path / "draft" / "wait.md").exists()
    assert list((tmp_path / "publish").iterdir()) == []


def test_unlistable_article_dir_aborts(tmp_path, monkeypatch):
    """A directory listing failure is fatal; no index is written."""
    from microblog.core import articles

    def _fail(directory):
        raise DirectoryListError(directory, PermissionError("denied"))

    monkeypatch.setattr(articles, "list_dir", _fail)

    with pytest.raises(DirectoryListError):
        run()
    assert not (tmp_path / "publish" / "index.html").exists()


def test_dir_blocked_by_file_is_fatal(tmp_path):
    (tmp_path / "publish").write_text("not a directory")
    with pytest.raises(DirectoryCreateError):
        run()
