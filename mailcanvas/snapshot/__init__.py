"""Screenshot boundary for social previews."""

from mailcanvas.snapshot.core import SharedEmail, SocialPreview, capture_page, fallback_svg, social_preview

__all__ = ["SharedEmail", "SocialPreview", "capture_page", "fallback_svg", "social_preview"]
