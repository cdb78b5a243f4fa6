"""Social preview image for a shared email, with a vector fallback that always works."""

from html import escape
from typing import Any, Callable

from pydantic import BaseModel

from mailcanvas.common.utils.config import get_config
from mailcanvas.common.utils.logger import get_logger
from mailcanvas.common.utils.text import sanitize_text
from mailcanvas.converter.page import wrap_page
from mailcanvas.converter.parser import render_source
from mailcanvas.layout.measure import rendered_page

logger = get_logger(__name__)

DEFAULT_TITLE = "Shared Email"
DEFAULT_AUTHOR = "Anonymous"

PNG_CACHE_CONTROL = "public, max-age=31536000, immutable"
FALLBACK_CACHE_CONTROL = "public, max-age=300"


class SharedEmail(BaseModel):
    """A shared email as storage returns it."""

    email_subject: str | None = None
    email_address: str | None = None
    email_json: Any = None  # object, JSON text, or None
    email_html: str | None = None


class SocialPreview(BaseModel):
    content: bytes
    media_type: str
    cache_control: str
    is_fallback: bool = False


def capture_page(html: str, width: int | None = None, height: int | None = None) -> bytes:
    """PNG screenshot of `html` clipped to the preview raster."""
    cfg = get_config()
    width = width or cfg.og_width
    height = height or cfg.og_height
    with rendered_page(html, width, height) as page:
        return page.screenshot(
            type="png",
            full_page=False,
            clip={"x": 0, "y": 0, "width": width, "height": height},
        )


def fallback_svg(title: str, author: str) -> str:
    """Deterministic preview card: wordmark, title, author line and tagline."""
    cfg = get_config()
    product = escape(cfg.product_name)
    tagline = escape(cfg.product_tagline)
    title = escape(title)
    author = escape(author)

    return f"""<svg width="{cfg.og_width}" height="{cfg.og_height}" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="bg" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:#f0f9ff;stop-opacity:1" />
      <stop offset="50%" style="stop-color:#ffffff;stop-opacity:1" />
      <stop offset="100%" style="stop-color:#faf5ff;stop-opacity:1" />
    </linearGradient>
  </defs>
  <rect width="100%" height="100%" fill="url(#bg)"/>
  <rect x="100" y="150" width="1000" height="330" rx="20" fill="#ffffff" stroke="#e5e7eb" stroke-width="2"/>
  <circle cx="200" cy="220" r="25" fill="#3b82f6"/>
  <text x="250" y="235" font-family="Arial, sans-serif" font-size="24" font-weight="bold" fill="#000000">{product}</text>
  <text x="200" y="300" font-family="Arial, sans-serif" font-size="32" font-weight="bold" fill="#000000">{title}</text>
  <text x="200" y="350" font-family="Arial, sans-serif" font-size="16" fill="#6b7280">Shared by {author}</text>
  <text x="200" y="420" font-family="Arial, sans-serif" font-size="14" fill="#9ca3af">Created with {product} • {tagline}</text>
</svg>
"""


def social_preview(shared: SharedEmail, capture: Callable[[str], bytes] | None = None) -> SocialPreview:
    """Screenshot of the share page, or the SVG card if anything on that path fails.

    Never raises: the result feeds public link previews.
    """
    capture = capture or capture_page
    title = sanitize_text(shared.email_subject) or DEFAULT_TITLE
    author = sanitize_text(shared.email_address) or DEFAULT_AUTHOR

    try:
        markup = render_source(shared.email_json, fallback_markup=shared.email_html)
        image = capture(wrap_page(markup, title, author))
    except Exception:
        logger.exception("Error generating preview image, serving fallback")
        return SocialPreview(
            content=fallback_svg(title, author).encode("utf-8"),
            media_type="image/svg+xml",
            cache_control=FALLBACK_CACHE_CONTROL,
            is_fallback=True,
        )

    return SocialPreview(content=image, media_type="image/png", cache_control=PNG_CACHE_CONTROL)
