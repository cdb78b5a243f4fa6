"""Selection/edit contract between the editor and rendered block regions."""

from typing import Any, Callable

from mailcanvas.blocks.catalog import block_color, block_icon, block_label
from mailcanvas.blocks.models import EmailBlock, EmailDocument
from mailcanvas.common.utils.logger import get_logger
from mailcanvas.layout.models import BlockRegion
from mailcanvas.overlay.models import Affordance, EditRequest, Gesture

logger = get_logger(__name__)

NEUTRAL_HOVER_COLOR = "#93C5FD"
NEUTRAL_BADGE_COLOR = "#6B7280"


class OverlaySession:
    """Selection state for one editing session. At most one block is selected."""

    def __init__(
        self,
        document: EmailDocument | None = None,
        on_select: Callable[[str | None], Any] | None = None,
        on_edit: Callable[[EditRequest], Any] | None = None,
    ):
        self.document = document
        self.selected_block_id: str | None = None
        self._on_select = on_select
        self._on_edit = on_edit

    def _require(self, block_id: str) -> EmailBlock | None:
        if self.document is None:
            return None
        block = self.document.block(block_id)
        if block is None:
            raise KeyError(block_id)
        return block

    def is_selected(self, block_id: str) -> bool:
        return self.selected_block_id == block_id

    def select(self, block_id: str) -> bool:
        """Select `block_id`, deselecting any other. Returns False if it was already selected."""
        self._require(block_id)
        if self.selected_block_id == block_id:
            return False
        self.selected_block_id = block_id
        logger.debug("Selected block %s", block_id)
        if self._on_select is not None:
            self._on_select(block_id)
        return True

    def clear(self) -> bool:
        if self.selected_block_id is None:
            return False
        self.selected_block_id = None
        if self._on_select is not None:
            self._on_select(None)
        return True

    def edit(self, block_id: str, gesture: Gesture | None = None) -> EditRequest:
        """Ask the editor to open the block's editor. Does not depend on selection."""
        block = self._require(block_id)
        request = EditRequest(
            block_id=block_id,
            block_type=block.block_type if block is not None else None,
            gesture=gesture,
        )
        if self._on_edit is not None:
            self._on_edit(request)
        return request

    def handle(self, gesture: Gesture | str, block_id: str) -> EditRequest | None:
        """Dispatch a pointer gesture on a block's region."""
        gesture = Gesture(gesture)
        match gesture:
            case Gesture.CLICK:
                self.select(block_id)
                return None
            case Gesture.DOUBLE_CLICK:
                return self.edit(block_id, gesture)
            case Gesture.EDIT_BUTTON:
                # The edit control only exists on the selected block
                if not self.is_selected(block_id):
                    return None
                return self.edit(block_id, gesture)


def affordance(block: EmailBlock, selected_block_id: str | None, region: BlockRegion) -> Affordance:
    """Drawing rules for a block's overlay; no hidden state."""
    if region.block_id != block.id:
        raise ValueError(f"Region {region.block_id} does not belong to block {block.id}")

    selected = selected_block_id == block.id
    color = block_color(block)
    icon = block_icon(block)
    label = block_label(block)

    return Affordance(
        block_id=block.id,
        selected=selected,
        x=region.x,
        y=region.y,
        width=region.width,
        height=region.height,
        border_color=color if selected else "transparent",
        hover_color=None if selected else NEUTRAL_HOVER_COLOR,
        badge_icon=icon,
        badge_label=label,
        badge_color=color if selected else NEUTRAL_BADGE_COLOR,
        badge_visible=selected,
        show_edit_control=selected,
        show_handles=selected,
        compact_badge=f"{icon} {label.lower()}" if region.compact else None,
        tooltip=f"{label} block - Click to select, double-click to edit",
    )
