"""Markdown post source reader.

Enumerates ``*.md`` files in the posts directory and splits each one into
its YAML front-matter and markdown body. Files are read in sorted filename
order so that catalog builds are reproducible across platforms.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _PostLoader(yaml.SafeLoader):
    """SafeLoader that leaves dates and timestamps as plain strings."""


_PostLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _PostYAMLHandler(YAMLHandler):
    """Front-matter handler whose ``date`` values reach the catalog unparsed."""

    def load(self, fm: str, **kwargs: Any) -> Any:
        kwargs.setdefault("Loader", _PostLoader)
        return super().load(fm, **kwargs)


class CatalogError(ValueError):
    """A post document could not be turned into a catalog entry."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{filename}: {message}")
        self.filename = filename


@dataclass(frozen=True)
class PostSource:
    """Raw content of one post file."""

    filename: str
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def read_post_source(path: Path) -> PostSource:
    """Read a single markdown file into a :class:`PostSource`.

    Raises:
        CatalogError: If the file is not UTF-8 or its front-matter is not valid YAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CatalogError(path.name, "file is not valid UTF-8") from exc

    try:
        post = frontmatter.loads(text, handler=_PostYAMLHandler())
    except (yaml.YAMLError, ValueError) as exc:
        raise CatalogError(path.name, f"invalid front-matter: {exc}") from exc

    return PostSource(
        filename=path.name, metadata=dict(post.metadata), body=post.content
    )


def load_post_sources(posts_dir: Path) -> list[PostSource]:
    """Load every markdown post directly inside *posts_dir*.

    Raises:
        FileNotFoundError: If *posts_dir* does not exist.
        CatalogError: If any file cannot be parsed.
    """
    if not posts_dir.is_dir():
        raise FileNotFoundError(f"Posts directory not found: {posts_dir}")

    paths = sorted(p for p in posts_dir.glob(f"*{POST_SUFFIX}") if p.is_file())
    sources = [read_post_source(p) for p in paths]
    logger.debug("Loaded %d post sources from %s", len(sources), posts_dir)
    return sources


def split_sources(
    sources: list[PostSource],
) -> tuple[dict[str, str], dict[str, dict[str, Any]]]:
    """Split sources into (filename -> body, filename -> metadata) mappings."""
    bodies = {s.filename: s.body for s in sources}
    metadata = {s.filename: s.metadata for s in sources}
    return bodies, metadata
