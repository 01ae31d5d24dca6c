"""Shared fixtures for blogsite tests."""

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blogsite.config import get_settings

    get_settings.cache_clear()

    # 2. Markdown renderer singleton
    import blogsite.services.render as render_mod

    render_mod._renderer = None


@pytest.fixture
def posts_dir(tmp_path):
    """An empty posts directory."""
    path = tmp_path / "posts"
    path.mkdir()
    return path


@pytest.fixture
def write_post(posts_dir):
    """Write a markdown post with YAML front-matter into ``posts_dir``."""

    def _write(filename: str, front_matter: str, body: str = "") -> None:
        (posts_dir / filename).write_text(
            f"---\n{front_matter.strip()}\n---\n{body}", encoding="utf-8"
        )

    return _write


@pytest.fixture
def mock_settings(monkeypatch, posts_dir):
    """Provide a Settings object pointing at the temporary posts directory."""
    from blogsite.config import Settings, get_settings

    test_settings = Settings(
        posts_dir=posts_dir,
        site_url="https://blog.example.com",
        site_name="Example Blog",
        homepage_post_count=5,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blogsite.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from blogsite.config import get_settings creates a local binding that
    # the blogsite.config monkeypatch above does not affect)
    for mod_path in [
        "blogsite.main",
        "blogsite.routers.posts",
        "blogsite.routers.site",
        "blogsite.routers.sitemap",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings
