"""Overlay contract models."""

from enum import Enum

from pydantic import BaseModel


class Gesture(Enum):
    CLICK = "click"
    DOUBLE_CLICK = "double_click"
    EDIT_BUTTON = "edit_button"


class EditRequest(BaseModel):
    block_id: str
    block_type: str | None = None
    gesture: Gesture | None = None


class Affordance(BaseModel):
    """How the overlay should draw one block. Pure function of (block, selection, region)."""

    block_id: str
    selected: bool
    x: float
    y: float
    width: float
    height: float
    border_color: str  # "transparent" unless selected
    hover_color: str | None  # only unselected blocks get a hover highlight
    badge_icon: str
    badge_label: str
    badge_color: str
    badge_visible: bool
    show_edit_control: bool
    show_handles: bool  # corner handles around the selection
    compact_badge: str | None = None  # "icon kind" shown instead of full chrome on compact regions
    tooltip: str
