"""Sitemap generation (https://www.sitemaps.org/protocol.html)."""

from typing import NamedTuple
from xml.sax.saxutils import escape

from blogsite.models.post import Post
from blogsite.services.catalog import parse_post_date

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapEntry(NamedTuple):
    loc: str
    changefreq: str
    priority: str
    lastmod: str | None = None


# (path, changefreq, priority) for the top-level pages
STATIC_PAGES = [
    ("", "weekly", "1.0"),
    ("/blog", "weekly", "0.9"),
    ("/about", "monthly", "0.8"),
    ("/contact", "monthly", "0.8"),
]

POST_CHANGEFREQ = "monthly"
POST_PRIORITY = "0.7"


def sitemap_entries(posts: list[Post], site_url: str) -> list[SitemapEntry]:
    """Static pages first, then one entry per post in catalog order."""
    base = site_url.rstrip("/")
    entries = [
        SitemapEntry(f"{base}{path}", changefreq, priority)
        for path, changefreq, priority in STATIC_PAGES
    ]
    for post in posts:
        entries.append(
            SitemapEntry(
                f"{base}/blog/{post.slug}",
                POST_CHANGEFREQ,
                POST_PRIORITY,
                lastmod=_lastmod(post.date),
            )
        )
    return entries


def _lastmod(value: str) -> str | None:
    """W3C datetime for ``<lastmod>``, or None when the post date does not parse."""
    parsed = parse_post_date(value)
    if parsed is None:
        return None
    if ":" not in value:
        return parsed.date().isoformat()
    return parsed.isoformat()


def _render_entry(entry: SitemapEntry) -> str:
    lines = ["\t<url>", f"\t\t<loc>{escape(entry.loc)}</loc>"]
    if entry.lastmod:
        lines.append(f"\t\t<lastmod>{escape(entry.lastmod)}</lastmod>")
    lines.append(f"\t\t<changefreq>{entry.changefreq}</changefreq>")
    lines.append(f"\t\t<priority>{entry.priority}</priority>")
    lines.append("\t</url>")
    return "\n".join(lines)


def build_sitemap(posts: list[Post], site_url: str) -> str:
    """Render the sitemap XML document for the site and its published posts."""
    urls = "\n".join(_render_entry(e) for e in sitemap_entries(posts, site_url))
    document = f"""
<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="{SITEMAP_NS}">
{urls}
</urlset>
"""
    return document.strip()
