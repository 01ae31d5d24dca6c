"""Site metadata endpoint."""

from fastapi import APIRouter

from blogsite.config import get_settings
from blogsite.models.site import SiteInfo, ThemeInfo

router = APIRouter(prefix="/site", tags=["site"])


@router.get("", response_model=SiteInfo)
async def site_info():
    """Get site-wide metadata for the rendering layer."""
    settings = get_settings()
    return SiteInfo(
        name=settings.site_name,
        motto=settings.site_motto,
        title=settings.site_title,
        url=settings.site_url,
        description=settings.site_description,
        long_description=settings.site_long_description,
        keywords=settings.site_keywords,
        author=settings.site_author,
        email=settings.site_email,
        og_image=settings.site_og_image,
        socials=settings.site_socials,
        themes=ThemeInfo(light=settings.theme_light, dark=settings.theme_dark),
    )
