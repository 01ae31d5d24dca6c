"""Public site metadata models."""

from pydantic import BaseModel


class ThemeInfo(BaseModel):
    """Theme names the frontend toggles between."""

    light: str
    dark: str


class SiteInfo(BaseModel):
    """Site-wide configuration exposed to the rendering layer."""

    name: str
    motto: str
    title: str
    url: str
    description: str
    long_description: str
    keywords: str
    author: str
    email: str
    og_image: str
    socials: dict[str, str] = {}
    themes: ThemeInfo
