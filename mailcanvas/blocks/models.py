"""Email document schema: typed content blocks and the document that orders them."""

from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator
from pydantic.alias_generators import to_camel


class BlockKind(Enum):
    HEADER = "header"
    HERO = "hero"
    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"
    DIVIDER = "divider"
    FOOTER = "footer"

    @classmethod
    def parse(cls, value: Any) -> "BlockKind | None":
        """Return the kind for a tag, or None for tags this version does not know."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


KIND_VALUES = frozenset(kind.value for kind in BlockKind)

SizeOption = Literal["small", "medium", "large", "extra-large"]

# Predefined sizes, resolved to CSS when rendering
SIZE_MAPPINGS: dict[str, dict[str, str]] = {
    "padding": {"small": "10px", "medium": "20px", "large": "30px", "extra-large": "40px"},
    "margin": {"small": "5px", "medium": "10px", "large": "20px", "extra-large": "30px"},
    "font_size": {"small": "12px", "medium": "16px", "large": "20px", "extra-large": "24px"},
    "line_height": {"small": "1.2", "medium": "1.4", "large": "1.6", "extra-large": "1.8"},
    "border_width": {"small": "1px", "medium": "2px", "large": "3px", "extra-large": "4px"},
    "border_radius": {"small": "4px", "medium": "8px", "large": "12px", "extra-large": "16px"},
    "width": {"small": "200px", "medium": "400px", "large": "600px", "extra-large": "800px"},
    "height": {"small": "100px", "medium": "200px", "large": "300px", "extra-large": "400px"},
}


def css_size(prop: str, value: str) -> str:
    """Resolve a size option to its CSS value; free-form values pass through."""
    return SIZE_MAPPINGS.get(prop, {}).get(value, value)


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class BlockStyles(WireModel):
    padding: str | None = None
    margin: str | None = None
    text_color: str | None = None
    background_color: str | None = None
    border_color: str | None = None
    font_size: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    text_align: Literal["left", "center", "right"] | None = None
    line_height: str | None = None
    border_width: str | None = None
    border_style: Literal["solid", "dashed", "dotted", "none"] | None = None
    border_radius: str | None = None
    width: str | None = None
    height: str | None = None
    text_decoration: Literal["none", "underline", "line-through"] | None = None


# ---------------------------------------------------------------------------
# Content per kind
# ---------------------------------------------------------------------------


class HeaderContent(WireModel):
    text: str | None = None  # company name when there is no logo
    image_url: str | None = None
    image_alt: str | None = None
    image_width: int | None = None
    image_height: int | None = None


class HeroContent(WireModel):
    headline: str = ""
    subheadline: str | None = None


class TextContent(WireModel):
    text: str = ""
    link_text: str | None = None  # linkable fragment inside the text
    link_url: str | None = None


class ImageContent(WireModel):
    image_url: str = ""
    image_alt: str = ""
    image_width: int | None = None
    image_height: int | None = None
    caption: str | None = None
    link_url: str | None = None  # makes the image clickable


class ButtonContent(WireModel):
    text: str = ""
    url: str = "#"
    button_style: Literal["primary", "secondary", "outline", "ghost"] = "primary"
    background_color: str | None = None


class DividerContent(WireModel):
    divider_type: Literal["line", "space"] = "line"
    thickness: int | None = None  # line dividers
    height: int | None = None  # space dividers


class SocialLink(WireModel):
    platform: str
    url: str


class FooterContent(WireModel):
    company_name: str = ""
    address: str | None = None
    unsubscribe_text: str = "Unsubscribe"
    unsubscribe_url: str = "#"
    privacy_policy_text: str | None = None
    privacy_policy_url: str | None = None
    social_links: list[SocialLink] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

_TAG_ALIASES = AliasChoices("blockType", "type", "block_type")


def _tag_field(kind: str) -> Any:
    return Field(kind, validation_alias=_TAG_ALIASES, serialization_alias="blockType")


class BaseEmailBlock(WireModel):
    id: str = Field(min_length=1)
    block_type: str
    order_id: int | None = None
    styles: BlockStyles = Field(default_factory=BlockStyles)

    @property
    def kind(self) -> BlockKind | None:
        return BlockKind.parse(self.block_type)


class HeaderBlock(BaseEmailBlock):
    block_type: Literal["header"] = _tag_field("header")
    content: HeaderContent = Field(default_factory=HeaderContent)


class HeroBlock(BaseEmailBlock):
    block_type: Literal["hero"] = _tag_field("hero")
    content: HeroContent = Field(default_factory=HeroContent)


class TextBlock(BaseEmailBlock):
    block_type: Literal["text"] = _tag_field("text")
    content: TextContent = Field(default_factory=TextContent)


class ImageBlock(BaseEmailBlock):
    block_type: Literal["image"] = _tag_field("image")
    content: ImageContent = Field(default_factory=ImageContent)


class ButtonBlock(BaseEmailBlock):
    block_type: Literal["button"] = _tag_field("button")
    content: ButtonContent = Field(default_factory=ButtonContent)


class DividerBlock(BaseEmailBlock):
    block_type: Literal["divider"] = _tag_field("divider")
    content: DividerContent = Field(default_factory=DividerContent)


class FooterBlock(BaseEmailBlock):
    block_type: Literal["footer"] = _tag_field("footer")
    content: FooterContent = Field(default_factory=FooterContent)


class UnknownBlock(BaseEmailBlock):
    """A block whose kind this version does not know (e.g. written by a newer editor).

    Content is kept verbatim so it survives a load/save cycle.
    """

    block_type: str = _tag_field("")
    content: dict[str, Any] = Field(default_factory=dict)


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        raw = value.get("blockType", value.get("type", value.get("block_type")))
    else:
        raw = getattr(value, "block_type", None)
    return raw if isinstance(raw, str) and raw in KIND_VALUES else "unknown"


EmailBlock = Annotated[
    Union[
        Annotated[HeaderBlock, Tag("header")],
        Annotated[HeroBlock, Tag("hero")],
        Annotated[TextBlock, Tag("text")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[ButtonBlock, Tag("button")],
        Annotated[DividerBlock, Tag("divider")],
        Annotated[FooterBlock, Tag("footer")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class GlobalStyles(WireModel):
    font_family: str | None = None
    container_width: int | None = None
    background_color: str | None = None
    container_background_color: str | None = None


class DocumentMetadata(WireModel):
    version: str = "1.0"
    created_at: str | None = None
    updated_at: str | None = None
    tags: list[str] = Field(default_factory=list)


class EmailDocument(WireModel):
    """An email: an ordered, non-empty sequence of blocks with unique ids.

    Order is vertical stacking order. Edits happen a whole block at a time and
    return a new document.
    """

    id: str | None = None
    subject: str | None = None
    preheader: str | None = None
    blocks: list[EmailBlock] = Field(min_length=1)
    global_styles: GlobalStyles = Field(default_factory=GlobalStyles)
    metadata: DocumentMetadata | None = None

    @model_validator(mode="after")
    def unique_block_ids(self) -> "EmailDocument":
        seen: set[str] = set()
        for block in self.blocks:
            if block.id in seen:
                raise ValueError(f"Duplicate block id: {block.id}")
            seen.add(block.id)
        return self

    def __getitem__(self, index: int) -> EmailBlock:
        return self.blocks[index]

    def __iter__(self) -> Iterator[EmailBlock]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def block_ids(self) -> list[str]:
        return [block.id for block in self.blocks]

    def block(self, block_id: str) -> EmailBlock | None:
        return next((b for b in self.blocks if b.id == block_id), None)

    def _with_blocks(self, blocks: list[EmailBlock]) -> "EmailDocument":
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields["blocks"] = blocks
        return type(self).model_validate(fields)

    def replace_block(self, block: EmailBlock) -> "EmailDocument":
        """Swap the block with the same id for `block`."""
        if self.block(block.id) is None:
            raise KeyError(block.id)
        return self._with_blocks([block if b.id == block.id else b for b in self.blocks])

    def insert_block(self, index: int, block: EmailBlock) -> "EmailDocument":
        blocks = list(self.blocks)
        blocks.insert(index, block)
        return self._with_blocks(blocks)

    def remove_block(self, block_id: str) -> "EmailDocument":
        if self.block(block_id) is None:
            raise KeyError(block_id)
        return self._with_blocks([b for b in self.blocks if b.id != block_id])
