"""Email block schema: kinds, per-kind content, documents and display tables."""

from mailcanvas.blocks.catalog import BLOCK_COLORS, BLOCK_ICONS, block_color, block_icon, block_label
from mailcanvas.blocks.core import ValidationIssue, ValidationResult, generate_block_id, validate
from mailcanvas.blocks.models import (
    BlockKind,
    BlockStyles,
    ButtonBlock,
    ButtonContent,
    DividerBlock,
    DividerContent,
    EmailBlock,
    EmailDocument,
    FooterBlock,
    FooterContent,
    GlobalStyles,
    HeaderBlock,
    HeaderContent,
    HeroBlock,
    HeroContent,
    ImageBlock,
    ImageContent,
    SocialLink,
    TextBlock,
    TextContent,
    UnknownBlock,
)

__all__ = [
    "BLOCK_COLORS",
    "BLOCK_ICONS",
    "BlockKind",
    "BlockStyles",
    "ButtonBlock",
    "ButtonContent",
    "DividerBlock",
    "DividerContent",
    "EmailBlock",
    "EmailDocument",
    "FooterBlock",
    "FooterContent",
    "GlobalStyles",
    "HeaderBlock",
    "HeaderContent",
    "HeroBlock",
    "HeroContent",
    "ImageBlock",
    "ImageContent",
    "SocialLink",
    "TextBlock",
    "TextContent",
    "UnknownBlock",
    "ValidationIssue",
    "ValidationResult",
    "block_color",
    "block_icon",
    "block_label",
    "generate_block_id",
    "validate",
]
