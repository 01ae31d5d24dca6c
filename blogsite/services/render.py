"""Markdown to HTML rendering for post bodies.

The ``Markdown`` instance (and its Pygments-backed code highlighter) is
built on first use and shared for the process lifetime.
"""

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {
    "codehilite": {"css_class": "highlight", "guess_lang": False},
}

# Lazy singleton — live for the process lifetime
_renderer: markdown.Markdown | None = None


def _get_renderer() -> markdown.Markdown:
    """Return the shared Markdown renderer (lazy singleton)."""
    global _renderer
    if _renderer is None:
        _renderer = markdown.Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        )
    return _renderer


def render_markdown(text: str) -> str:
    """Render a markdown post body to HTML."""
    renderer = _get_renderer()
    try:
        return renderer.convert(text)
    finally:
        renderer.reset()
