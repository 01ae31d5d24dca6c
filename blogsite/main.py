"""
Blogsite API

Thin FastAPI backend serving the markdown post catalog, homepage feed and sitemap.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogsite.config import get_settings
from blogsite.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from blogsite.routers import posts, site, sitemap

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    s = get_settings()
    if not s.posts_dir.is_dir():
        logger.warning("Posts directory %s does not exist", s.posts_dir)
    yield


app = FastAPI(
    title="Blogsite API",
    description="Markdown blog post catalog, JSON feed and sitemap",
    version=VERSION,
    lifespan=lifespan,
)

# Request IDs and security headers
app.add_middleware(RequestIDMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(posts.router, prefix="/api")
app.include_router(site.router, prefix="/api")
app.include_router(sitemap.router)


def _check_config() -> str:
    """Verify required configuration is loaded. Returns 'ok' or 'fail'."""
    s = get_settings()
    if s.site_url and s.site_name:
        return "ok"
    return "fail"


def _check_content() -> str:
    """Verify the posts directory is readable. Returns 'ok' or 'fail'."""
    return "ok" if get_settings().posts_dir.is_dir() else "fail"


def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    checks = {"config": _check_config(), "content": _check_content()}
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": "blogsite-api",
        "version": VERSION,
        "checks": checks,
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check verifying configuration and content."""
    result = _run_health_checks()
    status_code = 200 if result["status"] in ("ok", "degraded") else 503
    return JSONResponse(content=result, status_code=status_code)
