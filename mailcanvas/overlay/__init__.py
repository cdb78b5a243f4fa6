"""Overlay contract consumed by the visual editor."""

from mailcanvas.overlay.core import NEUTRAL_BADGE_COLOR, NEUTRAL_HOVER_COLOR, OverlaySession, affordance
from mailcanvas.overlay.models import Affordance, EditRequest, Gesture

__all__ = [
    "Affordance",
    "EditRequest",
    "Gesture",
    "NEUTRAL_BADGE_COLOR",
    "NEUTRAL_HOVER_COLOR",
    "OverlaySession",
    "affordance",
]
