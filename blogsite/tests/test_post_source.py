"""Tests for the markdown post source reader."""

import pytest

from blogsite.services.post_source import (
    CatalogError,
    PostSource,
    load_post_sources,
    read_post_source,
    split_sources,
)


def test_read_post_source_splits_front_matter_and_body(posts_dir, write_post):
    write_post(
        "first-post.md",
        "title: First\ndescription: Desc\ndate: 2024-01-01\npublished: true",
        "Body text here.\n",
    )

    source = read_post_source(posts_dir / "first-post.md")

    assert source.filename == "first-post.md"
    assert source.metadata["title"] == "First"
    assert source.metadata["published"] is True
    assert "Body text here." in source.body
    assert "title:" not in source.body


def test_read_post_source_without_front_matter(posts_dir):
    (posts_dir / "bare.md").write_text("Just a body.", encoding="utf-8")

    source = read_post_source(posts_dir / "bare.md")

    assert source.metadata == {}
    assert source.body == "Just a body."


def test_invalid_yaml_raises_catalog_error(posts_dir, write_post):
    write_post("broken.md", "title: [unclosed\ndescription: x")

    with pytest.raises(CatalogError) as exc_info:
        read_post_source(posts_dir / "broken.md")

    assert exc_info.value.filename == "broken.md"
    assert "broken.md" in str(exc_info.value)


def test_non_utf8_file_raises_catalog_error(posts_dir):
    (posts_dir / "latin1.md").write_bytes(b"---\ntitle: caf\xe9\n---\n")

    with pytest.raises(CatalogError, match="latin1.md"):
        read_post_source(posts_dir / "latin1.md")


def test_load_post_sources_sorted_by_filename(posts_dir, write_post):
    write_post("b.md", "title: B")
    write_post("c.md", "title: C")
    write_post("a.md", "title: A")

    sources = load_post_sources(posts_dir)

    assert [s.filename for s in sources] == ["a.md", "b.md", "c.md"]


def test_load_post_sources_ignores_other_files(posts_dir, write_post):
    write_post("post.md", "title: Post")
    (posts_dir / "notes.txt").write_text("not a post", encoding="utf-8")
    (posts_dir / "drafts.md").mkdir()
    (posts_dir / "drafts.md" / "nested.md").write_text("---\n---\n", encoding="utf-8")

    sources = load_post_sources(posts_dir)

    assert [s.filename for s in sources] == ["post.md"]


def test_load_post_sources_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_post_sources(tmp_path / "nope")


def test_split_sources():
    sources = [
        PostSource(filename="a.md", metadata={"title": "A"}, body="alpha"),
        PostSource(filename="b.md", metadata={"title": "B"}, body="beta"),
    ]

    bodies, metadata = split_sources(sources)

    assert bodies == {"a.md": "alpha", "b.md": "beta"}
    assert metadata == {"a.md": {"title": "A"}, "b.md": {"title": "B"}}
    assert list(metadata) == ["a.md", "b.md"]


def test_unquoted_dates_stay_strings(posts_dir, write_post):
    write_post(
        "dated.md",
        "title: Dated\ndate: 2024-01-01\nupdated: 2024-01-02T10:00:00Z",
    )

    source = read_post_source(posts_dir / "dated.md")

    assert source.metadata["date"] == "2024-01-01"
    assert source.metadata["updated"] == "2024-01-02T10:00:00Z"


def test_out_of_range_unquoted_date_is_read_as_text(posts_dir, write_post):
    write_post("typo.md", "title: Typo\ndate: 2024-13-45\npublished: true")

    source = read_post_source(posts_dir / "typo.md")

    assert source.metadata["date"] == "2024-13-45"
    assert source.metadata["published"] is True
