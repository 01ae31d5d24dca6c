"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:8000",
        "https://turtledev.io",
    ]

    # Content
    posts_dir: Path = Path("posts")
    homepage_post_count: int = 5

    # Site
    site_name: str = "TurtleDev"
    site_motto: str = "Slow is Smooth, Smooth is Fast"
    site_title: str = "Turtle Dev - Software Development Blog"
    site_url: str = "https://turtledev.io"
    site_description: str = (
        "Software development blog - quality technical content and insights"
    )
    site_long_description: str = (
        "Personal software development blog with high-quality technical content "
        "on modern web development, SvelteKit, FastAPI, and more."
    )
    site_keywords: str = (
        "software development, web development, SvelteKit, FastAPI, "
        "technical blog, programming"
    )
    site_author: str = "Harun"
    site_email: str = "hello@turtledev.io"
    site_og_image: str = "/images/og-image.png"
    site_socials: dict[str, str] = {
        "youtube": "https://youtube.com/@TurtleDevIO",
        "github": "https://github.com/harunzafer",
        "kofi": "https://ko-fi.com/turtledev",
    }

    # Theme names understood by the frontend toggle
    theme_light: str = "lemonade"
    theme_dark: str = "forest"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
