"""Tests for folder and file publishing."""

from __future__ import annotations

from pathlib import Path

import pytest
from mdblogger.config import BatchPolicy, BloggerConfig
from mdblogger.errors import FileIOError, InvalidInputPathError, PublishError
from mdblogger.publish import (
    FileAction,
    pull_file,
    push_file,
    push_folder,
    resolve_source,
    validate_project_folder,
)


def _make_vault(tmp_path: Path) -> Path:
    source = tmp_path / "vault" / "proj"
    (source / "images").mkdir(parents=True)
    (source / "images" / "a.png").write_bytes(b"\x89PNG")
    (source / "index.md").write_text(
        '---\ntitle: Proj\ncover_url: "[[cover.png]]"\n---\n'
        "# Proj\n\nIntro.\n\n![a](images/a.png)\n",
        encoding="utf-8",
    )
    (source / "notes.mdx").write_text("Just text.", encoding="utf-8")
    (source / "cover.png").write_bytes(b"\x89PNG-cover")
    return source


def test_validate_project_folder(tmp_path: Path) -> None:
    assert validate_project_folder(tmp_path) == tmp_path

    with pytest.raises(InvalidInputPathError):
        validate_project_folder(tmp_path / "missing")
    with pytest.raises(InvalidInputPathError, match="No project folder configured"):
        validate_project_folder(None)


def test_push_folder_transforms_markdown_and_copies_the_rest(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    site = tmp_path / "site"
    site.mkdir()

    report = push_folder(source, site, config=BloggerConfig())

    target = site / "proj"
    assert report.ok
    assert report.target == target
    assert report.published_count == 4

    index = (target / "index.mdx").read_text(encoding="utf-8")
    assert index == (
        "---\ntitle: Proj\ncover_url: /work/proj/cover.png\n---\n\n"
        "<HeadingWrapper>\n# Proj\n</HeadingWrapper>\n\n"
        "<ContentWrapper>\nIntro.\n</ContentWrapper>\n\n"
        "![a](/work/proj/images/a.png)"
    )
    assert not (target / "index.md").exists()
    assert (target / "notes.mdx").read_text(encoding="utf-8").endswith(
        "<ContentWrapper>\nJust text.\n</ContentWrapper>"
    )
    assert (target / "cover.png").read_bytes() == b"\x89PNG-cover"
    assert (target / "images" / "a.png").read_bytes() == b"\x89PNG"

    actions = {outcome.source.name: outcome.action for outcome in report.outcomes}
    assert actions == {
        "cover.png": FileAction.COPIED,
        "images": FileAction.COPIED_TREE,
        "index.md": FileAction.TRANSFORMED,
        "notes.mdx": FileAction.TRANSFORMED,
    }


def test_push_folder_uses_configured_prefix_and_tags(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    site = tmp_path / "site"
    site.mkdir()
    config = BloggerConfig(url_prefix="/blog/{folder}/")

    push_folder(source, site, config=config)

    index = (site / "proj" / "index.mdx").read_text(encoding="utf-8")
    assert "cover_url: /blog/proj/cover.png" in index
    assert "![a](/blog/proj/images/a.png)" in index


def test_push_folder_is_repeatable(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    site = tmp_path / "site"
    site.mkdir()

    push_folder(source, site, config=BloggerConfig())
    first = (site / "proj" / "index.mdx").read_text(encoding="utf-8")
    report = push_folder(source, site, config=BloggerConfig())

    assert report.ok
    assert (site / "proj" / "index.mdx").read_text(encoding="utf-8") == first


def test_push_folder_fails_fast_on_missing_paths(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)

    with pytest.raises(InvalidInputPathError) as exc_info:
        push_folder(source, tmp_path / "nope", config=BloggerConfig())
    assert exc_info.value.role == "project folder"
    assert not (tmp_path / "nope").exists()

    with pytest.raises(InvalidInputPathError):
        push_folder(tmp_path / "ghost", tmp_path, config=BloggerConfig())


def test_push_folder_skips_and_reports_failures(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    (source / "broken.md").write_bytes(b"\xff\xfe not utf-8")
    site = tmp_path / "site"
    site.mkdir()

    report = push_folder(source, site, config=BloggerConfig())

    assert not report.ok
    assert report.aborted is False
    assert [f.source.name for f in report.failures] == ["broken.md"]
    assert isinstance(report.failures[0].error, FileIOError)
    assert report.failures[0].error.path == source / "broken.md"
    assert (site / "proj" / "notes.mdx").exists()
    assert (site / "proj" / "index.mdx").exists()


def test_push_folder_abort_policy_stops_at_first_failure(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    (source / "a-broken.md").write_bytes(b"\xff\xfe")
    site = tmp_path / "site"
    site.mkdir()

    report = push_folder(
        source, site, config=BloggerConfig(), policy=BatchPolicy.ABORT
    )

    assert report.aborted is True
    assert [outcome.source.name for outcome in report.outcomes] == ["a-broken.md"]
    assert not (site / "proj" / "index.mdx").exists()


def test_push_folder_config_policy_applies_by_default(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)
    (source / "a-broken.md").write_bytes(b"\xff\xfe")
    site = tmp_path / "site"
    site.mkdir()

    report = push_folder(
        source, site, config=BloggerConfig(on_error=BatchPolicy.ABORT)
    )

    assert report.aborted is True


def test_push_folder_rejects_unknown_format(tmp_path: Path) -> None:
    source = _make_vault(tmp_path)

    with pytest.raises(PublishError, match="Unknown publish format: pdf"):
        push_folder(source, tmp_path, config=BloggerConfig(), format_id="pdf")


def test_push_file_copies_verbatim_by_default(tmp_path: Path) -> None:
    source = _make_vault(tmp_path) / "index.md"
    site = tmp_path / "site"
    site.mkdir()

    outcome = push_file(source, site, config=BloggerConfig())

    assert outcome.destination == site / "index.md"
    assert outcome.destination.read_text(encoding="utf-8") == source.read_text(
        encoding="utf-8"
    )


def test_push_file_with_mdx_format(tmp_path: Path) -> None:
    source = _make_vault(tmp_path) / "index.md"
    site = tmp_path / "site"
    site.mkdir()

    outcome = push_file(source, site, config=BloggerConfig(), format_id="mdx")

    assert outcome.destination == site / "index.mdx"
    assert "cover_url: /work/proj/cover.png" in outcome.destination.read_text(
        encoding="utf-8"
    )


def test_push_file_requires_existing_source(tmp_path: Path) -> None:
    with pytest.raises(InvalidInputPathError, match="source file"):
        push_file(tmp_path / "missing.md", tmp_path, config=BloggerConfig())


def test_pull_file_replaces_local_content(tmp_path: Path) -> None:
    site = tmp_path / "site"
    site.mkdir()
    (site / "post.md").write_text("from site", encoding="utf-8")
    local = tmp_path / "post.md"
    local.write_text("local draft", encoding="utf-8")

    remote = pull_file(local, site)

    assert remote == site / "post.md"
    assert local.read_text(encoding="utf-8") == "from site"


def test_pull_file_missing_remote(tmp_path: Path) -> None:
    with pytest.raises(InvalidInputPathError, match="project copy"):
        pull_file(tmp_path / "post.md", tmp_path)


def test_resolve_source_uses_vault_root(tmp_path: Path) -> None:
    config = BloggerConfig(vault_root=tmp_path / "vault")

    assert resolve_source(Path("proj"), config) == tmp_path / "vault" / "proj"
    assert resolve_source(tmp_path / "abs", config) == tmp_path / "abs"
    assert resolve_source(Path("proj"), BloggerConfig()) == Path("proj")


def test_push_folder_from_inside_the_source_folder(
    tmp_path: Path, monkeypatch
) -> None:
    source = _make_vault(tmp_path)
    site = tmp_path / "site"
    site.mkdir()
    monkeypatch.chdir(source)

    report = push_folder(Path("."), site, config=BloggerConfig())

    assert report.ok
    assert report.target == site / "proj"
    assert not (site / "index.mdx").exists()
    index = (site / "proj" / "index.mdx").read_text(encoding="utf-8")
    assert "cover_url: /work/proj/cover.png" in index


def test_push_file_with_relative_path(tmp_path: Path, monkeypatch) -> None:
    source = _make_vault(tmp_path)
    site = tmp_path / "site"
    site.mkdir()
    monkeypatch.chdir(source)

    outcome = push_file(Path("index.md"), site, config=BloggerConfig(), format_id="mdx")

    assert outcome.source == source / "index.md"
    assert "cover_url: /work/proj/cover.png" in outcome.destination.read_text(
        encoding="utf-8"
    )


def test_push_folder_reports_colliding_destinations(tmp_path: Path) -> None:
    source = tmp_path / "vault" / "proj"
    source.mkdir(parents=True)
    (source / "a.md").write_text("from md", encoding="utf-8")
    (source / "a.mdx").write_text("from mdx", encoding="utf-8")
    site = tmp_path / "site"
    site.mkdir()

    report = push_folder(source, site, config=BloggerConfig())

    assert not report.ok
    assert [f.source.name for f in report.failures] == ["a.mdx"]
    failure = report.failures[0]
    assert isinstance(failure.error, FileIOError)
    assert failure.destination == site / "proj" / "a.mdx"
    assert "already published from" in str(failure.error)
    assert "from md" in (site / "proj" / "a.mdx").read_text(encoding="utf-8")
    assert "from mdx" not in (site / "proj" / "a.mdx").read_text(encoding="utf-8")
