"""Per-kind display tables (icons and colors) used by editing affordances."""

from typing import Any

from mailcanvas.blocks.models import BlockKind
from mailcanvas.common.utils.config import get_config

BLOCK_ICONS: dict[BlockKind, str] = {
    BlockKind.HEADER: "🏠",
    BlockKind.HERO: "🎯",
    BlockKind.TEXT: "📝",
    BlockKind.IMAGE: "🖼️",
    BlockKind.BUTTON: "🔘",
    BlockKind.DIVIDER: "➖",
    BlockKind.FOOTER: "📄",
}

BLOCK_COLORS: dict[BlockKind, str] = {
    BlockKind.HEADER: "#8B5CF6",
    BlockKind.HERO: "#3B82F6",
    BlockKind.TEXT: "#10B981",
    BlockKind.IMAGE: "#F97316",
    BlockKind.BUTTON: "#EF4444",
    BlockKind.DIVIDER: "#6B7280",
    BlockKind.FOOTER: "#6366F1",
}


def _tag(kind: Any) -> Any:
    # Accept a kind, a raw tag, or a block
    return getattr(kind, "block_type", kind)


def block_icon(kind: Any) -> str:
    """Icon for a kind; unknown kinds get the fallback icon."""
    parsed = BlockKind.parse(_tag(kind))
    if parsed is None:
        return get_config().fallback_icon
    return BLOCK_ICONS.get(parsed, get_config().fallback_icon)


def block_color(kind: Any) -> str:
    """Tint color for a kind; unknown kinds get the neutral fallback."""
    parsed = BlockKind.parse(_tag(kind))
    if parsed is None:
        return get_config().fallback_color
    return BLOCK_COLORS.get(parsed, get_config().fallback_color)


def block_label(kind: Any) -> str:
    """Upper-cased kind name shown in badges."""
    tag = _tag(kind)
    if isinstance(tag, BlockKind):
        tag = tag.value
    label = str(tag).strip() if tag is not None else ""
    return label.upper() or "BLOCK"
