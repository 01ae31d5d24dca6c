"""Sitemap endpoint."""

from fastapi import APIRouter
from fastapi.responses import Response

from blogsite.config import get_settings
from blogsite.routers.posts import load_catalog
from blogsite.services.sitemap import build_sitemap

router = APIRouter(tags=["sitemap"])

# Browsers always revalidate; shared caches may reuse for an hour
SITEMAP_CACHE_CONTROL = "max-age=0, s-maxage=3600"


@router.get("/sitemap.xml")
async def sitemap() -> Response:
    """Serve the XML sitemap of static pages and published posts."""
    settings = get_settings()
    xml = build_sitemap(load_catalog(), settings.site_url)
    return Response(
        content=xml,
        media_type="application/xml",
        headers={"Cache-Control": SITEMAP_CACHE_CONTROL},
    )
