"""Blog post endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path

from blogsite.config import get_settings
from blogsite.models.post import Post, PostDetail
from blogsite.services.catalog import get_post_detail, get_posts, recent_posts
from blogsite.services.post_source import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._-]*$"


def _build_failed(exc: Exception) -> HTTPException:
    logger.error("Failed to build post catalog: %s", exc)
    return HTTPException(
        status_code=500, detail=f"Failed to build post catalog: {exc}"
    )


def load_catalog() -> list[Post]:
    """Build the post catalog for a request.

    Content problems surface as a 500 naming the offending file rather than
    as an empty or truncated post list.
    """
    settings = get_settings()
    try:
        return get_posts(settings.posts_dir)
    except (CatalogError, FileNotFoundError) as exc:
        raise _build_failed(exc) from exc


@router.get("", response_model=list[Post])
async def list_posts():
    """Get every published post, newest first."""
    return load_catalog()


@router.get("/recent", response_model=list[Post])
async def list_recent_posts():
    """Get the most recent posts for the homepage."""
    settings = get_settings()
    return recent_posts(load_catalog(), settings.homepage_post_count)


@router.get("/{slug}", response_model=PostDetail)
async def get_post(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
):
    """Get a single published post with its rendered HTML."""
    settings = get_settings()
    try:
        post = get_post_detail(settings.posts_dir, slug)
    except (CatalogError, FileNotFoundError) as exc:
        raise _build_failed(exc) from exc
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post
