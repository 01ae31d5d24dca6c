"""Post catalog builder.

Turns raw post sources into the ordered list of published posts consumed by
the homepage, the blog listing, the JSON feed and the sitemap.

A document with missing or invalid front-matter fails the whole build with a
:class:`CatalogError` naming the file, so a broken post never silently
disappears from the site.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blogsite.models.post import Post, PostDetail, PostMetadata
from blogsite.services.post_source import (
    CatalogError,
    load_post_sources,
    split_sources,
)
from blogsite.services.reading_time import estimate_reading_time
from blogsite.services.render import render_markdown

logger = logging.getLogger(__name__)

HOMEPAGE_POST_COUNT = 5

# Posts with unparseable dates sort after everything else
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def slug_from_filename(filename: str) -> str:
    """Derive a post slug by dropping the file extension."""
    return Path(filename).stem


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "front-matter"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


def parse_post_date(value: str) -> datetime | None:
    """Parse an ISO-8601 post date as an aware datetime (naive means UTC).

    Returns None when *value* is not a valid ISO-8601 date.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(post: Post) -> datetime:
    """Ordering key for a post; invalid dates map to the earliest instant."""
    parsed = parse_post_date(post.date)
    if parsed is None:
        logger.warning(
            "Unparseable date %r in post %s, sorting it last", post.date, post.slug
        )
        return _EARLIEST
    return parsed


def build_post(filename: str, metadata: Mapping[str, Any], body: str) -> Post:
    """Build a single :class:`Post` from its front-matter and body.

    An explicit ``readingTime`` in the front-matter is kept as-is; otherwise
    it is estimated from *body*.

    Raises:
        CatalogError: If the front-matter is missing required fields or has
            values of the wrong type.
    """
    try:
        meta = PostMetadata.model_validate(dict(metadata))
    except ValidationError as exc:
        raise CatalogError(
            filename, f"invalid front-matter ({_describe_validation_error(exc)})"
        ) from exc

    reading_time = meta.reading_time
    if reading_time is None:
        reading_time = estimate_reading_time(body)

    return Post(
        title=meta.title,
        description=meta.description,
        date=meta.date,
        categories=tuple(meta.categories),
        published=meta.published,
        slug=slug_from_filename(filename),
        reading_time=reading_time,
    )


def build_catalog(
    bodies: Mapping[str, str],
    metadata: Mapping[str, Mapping[str, Any]],
) -> list[Post]:
    """Build the catalog of published posts, newest first.

    Args:
        bodies: Filename to raw markdown body. A missing entry counts as an
            empty body.
        metadata: Filename to parsed front-matter. Its iteration order is the
            enumeration order used to break date ties.

    Returns:
        Published posts sorted by date descending. The sort is stable, so
        posts sharing a date keep their enumeration order.
    """
    posts: list[Post] = []
    for filename, meta in metadata.items():
        post = build_post(filename, meta, bodies.get(filename, ""))
        if post.published:
            posts.append(post)

    return sorted(posts, key=_sort_key, reverse=True)


def get_posts(posts_dir: Path) -> list[Post]:
    """Read the posts directory and build the catalog."""
    bodies, metadata = split_sources(load_post_sources(posts_dir))
    catalog = build_catalog(bodies, metadata)
    logger.debug(
        "Built catalog of %d published posts from %d documents",
        len(catalog),
        len(metadata),
    )
    return catalog


def recent_posts(catalog: list[Post], count: int = HOMEPAGE_POST_COUNT) -> list[Post]:
    """Return the first *count* posts of the catalog (fewer if it is shorter)."""
    return catalog[: max(count, 0)]


def find_post(catalog: list[Post], slug: str) -> Post | None:
    """Look up a published post by slug."""
    for post in catalog:
        if post.slug == slug:
            return post
    return None


def get_post_detail(posts_dir: Path, slug: str) -> PostDetail | None:
    """Return a published post with its rendered HTML body, or None if unknown."""
    bodies, metadata = split_sources(load_post_sources(posts_dir))
    post = find_post(build_catalog(bodies, metadata), slug)
    if post is None:
        return None

    body = next(
        (text for name, text in bodies.items() if slug_from_filename(name) == slug),
        "",
    )
    return PostDetail(**post.model_dump(), html=render_markdown(body))
