"""Main entrypoint. Exposes the public API."""

from mailcanvas.blocks import BlockKind, EmailDocument, block_color, block_icon, validate
from mailcanvas.converter import parse, render, render_email, render_source, sanitize_text, to_structure, wrap_page
from mailcanvas.layout import BlockRegion, Measurement, reconcile
from mailcanvas.overlay import OverlaySession, affordance
from mailcanvas.snapshot import SharedEmail, social_preview

__all__ = [
    "BlockKind",
    "BlockRegion",
    "EmailDocument",
    "Measurement",
    "OverlaySession",
    "SharedEmail",
    "affordance",
    "block_color",
    "block_icon",
    "parse",
    "reconcile",
    "render",
    "render_email",
    "render_source",
    "sanitize_text",
    "social_preview",
    "to_structure",
    "validate",
    "wrap_page",
]
