"""Recover documents from whatever storage hands back.

Input is one of three shapes: an already-structured object, a JSON encoding
of one, or pre-rendered markup. ``classify`` maps any value onto exactly one
of them; ``parse`` never raises and degrades to ``None`` when nothing usable
is left.
"""

import json
import re
from typing import Any, Literal

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, TypeAdapter, ValidationError

from mailcanvas.blocks.core import generate_block_id
from mailcanvas.blocks.models import KIND_VALUES, EmailBlock, EmailDocument
from mailcanvas.common.utils.logger import get_logger
from mailcanvas.converter.render import render

logger = get_logger(__name__)

_block_adapter: TypeAdapter[Any] = TypeAdapter(EmailBlock)

_PX = re.compile(r"(\d+)\s*px")


class StructuredSource(BaseModel):
    kind: Literal["structured"] = "structured"
    data: Any  # dict document, bare block list, or an EmailDocument


class EncodedSource(BaseModel):
    kind: Literal["encoded"] = "encoded"
    text: str


class MarkupSource(BaseModel):
    kind: Literal["markup"] = "markup"
    markup: str


DocumentSource = StructuredSource | EncodedSource | MarkupSource


def classify(source: Any) -> DocumentSource:
    """Total classification of a raw stored value."""
    match source:
        case StructuredSource() | EncodedSource() | MarkupSource():
            return source
        case EmailDocument() | dict() | list():
            return StructuredSource(data=source)
        case bytes() | bytearray():
            return classify(bytes(source).decode("utf-8", errors="replace"))
        case str() if source.lstrip().startswith("<"):
            return MarkupSource(markup=source)
        case str():
            return EncodedSource(text=source)
        case _:
            return MarkupSource(markup="")


# ---------------------------------------------------------------------------
# Structured
# ---------------------------------------------------------------------------


def _tag_of(entry: dict[str, Any]) -> Any:
    return entry.get("blockType", entry.get("type", entry.get("block_type")))


def _repair_blocks(raw_blocks: list[Any]) -> list[EmailBlock]:
    """Validate blocks one by one, fixing ids and dropping what cannot be read.

    Ids carried by the input are kept. Replacements for missing or repeated
    ids never take an id that some other block already carries.
    """
    entries = [e.model_dump(by_alias=True) if isinstance(e, BaseModel) else e for e in raw_blocks]
    reserved = {e["id"] for e in entries if isinstance(e, dict) and isinstance(e.get("id"), str) and e["id"]}

    blocks: list[EmailBlock] = []
    used: set[str] = set()

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping block %d: expected an object, got %s", index, type(entry).__name__)
            continue

        entry = dict(entry)
        block_id = entry.get("id")
        if not isinstance(block_id, str) or not block_id or block_id in used:
            tag = _tag_of(entry)
            new_id = generate_block_id(tag if isinstance(tag, str) and tag else "block", reserved)
            reserved.add(new_id)
            logger.warning("Block %d has missing or duplicate id %r, using %r", index, block_id, new_id)
            entry["id"] = new_id

        try:
            block = _block_adapter.validate_python(entry)
        except ValidationError as e:
            logger.warning("Skipping block %r: %s", entry["id"], e.errors(include_url=False))
            continue

        used.add(block.id)
        blocks.append(block)

    # Persisted documents carry orderId; honour it when every block has one
    if blocks and all(b.order_id is not None for b in blocks):
        blocks.sort(key=lambda b: b.order_id)

    return blocks


def _parse_structured(data: Any) -> EmailDocument | None:
    if isinstance(data, EmailDocument):
        return data
    if isinstance(data, list):
        data = {"blocks": data}
    if not isinstance(data, dict):
        return None

    raw_blocks = data.get("blocks")
    if not isinstance(raw_blocks, list):
        logger.warning("Structured document has no block list")
        return None

    blocks = _repair_blocks(raw_blocks)
    if not blocks:
        logger.warning("Structured document has no readable blocks")
        return None

    try:
        return EmailDocument.model_validate({**data, "blocks": blocks})
    except ValidationError as e:
        logger.warning("Dropping unreadable document metadata: %s", e.errors(include_url=False))
        return EmailDocument(blocks=blocks)


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def _text(element: Tag | None) -> str:
    if element is None:
        return ""
    return " ".join(element.get_text().split())


def _int_attr(element: Tag | None, name: str) -> int | None:
    if element is None:
        return None
    value = element.get(name)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _str_attr(element: Tag | None, name: str) -> str | None:
    if element is None:
        return None
    value = element.get(name)
    return value if isinstance(value, str) else None


def _inline_styles(element: Tag | None) -> dict[str, str]:
    styles: dict[str, str] = {}
    raw = _str_attr(element, "style")
    if not raw:
        return styles
    for declaration in raw.split(";"):
        prop, sep, value = declaration.partition(":")
        if sep and prop.strip() and value.strip():
            styles[prop.strip().lower()] = value.strip()
    return styles


def _markup_styles(element: Tag) -> dict[str, Any]:
    cell = element.find("td") if element.name != "td" else element
    inline = {**_inline_styles(element), **_inline_styles(cell if isinstance(cell, Tag) else None)}

    styles: dict[str, Any] = {}
    if inline.get("text-align") in ("left", "center", "right"):
        styles["textAlign"] = inline["text-align"]
    if "color" in inline:
        styles["textColor"] = inline["color"]
    if "background-color" in inline:
        styles["backgroundColor"] = inline["background-color"]
    if "font-family" in inline:
        styles["fontFamily"] = inline["font-family"]
    if "font-weight" in inline:
        styles["fontWeight"] = inline["font-weight"]
    if re.fullmatch(r"\d+(px|em|rem|%)", inline.get("font-size", "")):
        styles["fontSize"] = inline["font-size"]
    return styles


def _header_content(element: Tag) -> dict[str, Any]:
    img = element.find("img")
    if isinstance(img, Tag):
        return {
            "imageUrl": _str_attr(img, "src"),
            "imageAlt": _str_attr(img, "alt"),
            "imageWidth": _int_attr(img, "width"),
            "imageHeight": _int_attr(img, "height"),
        }
    heading = element.find(["h1", "h2"])
    return {"text": _text(heading if isinstance(heading, Tag) else element) or None}


def _hero_content(element: Tag) -> dict[str, Any]:
    heading = element.find(["h1", "h2"])
    paragraph = element.find("p")
    if isinstance(heading, Tag):
        return {
            "headline": _text(heading),
            "subheadline": _text(paragraph) if isinstance(paragraph, Tag) else None,
        }
    chunks = [s.strip() for s in element.stripped_strings]
    return {
        "headline": chunks[0] if chunks else "",
        "subheadline": chunks[1] if len(chunks) > 1 else None,
    }


def _text_content(element: Tag) -> dict[str, Any]:
    link = element.find("a")
    content: dict[str, Any] = {"text": _text(element)}
    if isinstance(link, Tag) and _str_attr(link, "href"):
        content["linkText"] = _text(link)
        content["linkUrl"] = _str_attr(link, "href")
    return content


def _image_content(element: Tag) -> dict[str, Any]:
    img = element.find("img")
    link = element.find("a")
    caption = element.find(attrs={"data-role": "caption"})
    img = img if isinstance(img, Tag) else None
    return {
        "imageUrl": _str_attr(img, "src") or "",
        "imageAlt": _str_attr(img, "alt") or "",
        "imageWidth": _int_attr(img, "width"),
        "imageHeight": _int_attr(img, "height"),
        "caption": _text(caption) if isinstance(caption, Tag) else None,
        "linkUrl": _str_attr(link, "href") if isinstance(link, Tag) else None,
    }


def _button_content(element: Tag) -> dict[str, Any]:
    link = element.find("a")
    link = link if isinstance(link, Tag) else None
    style = _str_attr(link, "data-button-style")
    return {
        "text": _text(link),
        "url": _str_attr(link, "href") or "#",
        "buttonStyle": style if style in ("primary", "secondary", "outline", "ghost") else "primary",
    }


def _divider_content(element: Tag) -> dict[str, Any]:
    rule = element.find("hr")
    if isinstance(rule, Tag):
        match = _PX.search(_inline_styles(rule).get("border-top", ""))
        return {"dividerType": "line", "thickness": int(match.group(1)) if match else 1}
    spacer = element.find(attrs={"data-role": "spacer"})
    match = _PX.search(_inline_styles(spacer if isinstance(spacer, Tag) else None).get("height", ""))
    return {"dividerType": "space", "height": int(match.group(1)) if match else None}


def _footer_content(element: Tag) -> dict[str, Any]:
    content: dict[str, Any] = {}

    company = element.find(attrs={"data-role": "company"})
    if not isinstance(company, Tag):
        first = element.find("p")
        strong = first.find("strong") if isinstance(first, Tag) else None
        company = strong if isinstance(strong, Tag) else first
    content["companyName"] = _text(company) if isinstance(company, Tag) else _text(element)

    address = element.find(attrs={"data-role": "address"})
    if isinstance(address, Tag):
        content["address"] = _text(address)

    content["socialLinks"] = [
        {"platform": a["data-platform"], "url": _str_attr(a, "href") or "#"}
        for a in element.find_all("a", attrs={"data-platform": True})
    ]

    for link in element.find_all("a"):
        if link.has_attr("data-platform"):
            continue
        role = _str_attr(link, "data-role")
        label = _text(link)
        if role == "unsubscribe" or (role is None and "unsubscribe" in label.lower()):
            content["unsubscribeText"] = label or "Unsubscribe"
            content["unsubscribeUrl"] = _str_attr(link, "href") or "#"
        elif role == "privacy" or (role is None and "privacy" in label.lower()):
            content["privacyPolicyText"] = label or "Privacy Policy"
            content["privacyPolicyUrl"] = _str_attr(link, "href") or "#"

    return content


_CONTENT_READERS = {
    "header": _header_content,
    "hero": _hero_content,
    "text": _text_content,
    "image": _image_content,
    "button": _button_content,
    "divider": _divider_content,
    "footer": _footer_content,
}


def markup_to_document(markup: str) -> EmailDocument | None:
    """Rebuild a document from markup carrying ``data-block-id`` / ``data-block-type``."""
    soup = BeautifulSoup(markup, "html.parser")

    raw_blocks: list[dict[str, Any]] = []
    for element in soup.find_all(attrs={"data-block-id": True}):
        block_type = _str_attr(element, "data-block-type") or ""
        reader = _CONTENT_READERS.get(block_type)
        if block_type in KIND_VALUES and reader is not None:
            content = reader(element)
        else:
            content = {"text": _text(element)}
        raw_blocks.append(
            {
                "id": _str_attr(element, "data-block-id"),
                "blockType": block_type,
                "styles": _markup_styles(element),
                "content": content,
            }
        )

    if not raw_blocks:
        return None

    title = soup.find("title")
    data: dict[str, Any] = {"blocks": raw_blocks}
    if isinstance(title, Tag) and _text(title):
        data["subject"] = _text(title)
    return _parse_structured(data)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def _parse_encoded(text: str) -> EmailDocument | None:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):  # JSONDecodeError, oversized int literals
        logger.info("Stored document is not JSON, reading it as markup")
        return markup_to_document(text)
    return _parse_structured(data)


def parse(source: Any) -> EmailDocument | None:
    """Best-effort document from a structured object, JSON text or markup. Never raises."""
    classified = classify(source)
    try:
        match classified:
            case StructuredSource():
                return _parse_structured(classified.data)
            case EncodedSource():
                return _parse_encoded(classified.text)
            case MarkupSource():
                return markup_to_document(classified.markup) if classified.markup else None
    except Exception:
        logger.warning("Could not read %s document", classified.kind, exc_info=True)
    return None


def _decodes(text: str) -> bool:
    try:
        json.loads(text)
    except (ValueError, RecursionError):  # JSONDecodeError, oversized int literals
        return False
    return True


def render_source(source: Any, fallback_markup: str | None = "") -> str:
    """Markup for any stored value. Never raises.

    Pre-rendered markup is returned as is. Structured or JSON input is parsed
    and rendered; when that yields nothing, ``fallback_markup`` is used, and
    failing that an empty content region.
    """
    classified = classify(source)
    match classified:
        case MarkupSource(markup=markup) if markup.strip():
            return markup
        case EncodedSource(text=text) if text.strip() and not _decodes(text):
            return fallback_markup or text

    document = parse(classified)
    if document is not None:
        try:
            return render(document)
        except Exception:
            logger.warning("Rendering document failed, using fallback markup", exc_info=True)

    if fallback_markup:
        return fallback_markup
    return render(None)
