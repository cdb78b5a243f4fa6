"""Block schema: kinds, display tables, document invariants, validation."""

import pytest
from pydantic import ValidationError

from mailcanvas.blocks import (
    BLOCK_COLORS,
    BLOCK_ICONS,
    BlockKind,
    ButtonBlock,
    ButtonContent,
    EmailDocument,
    ImageBlock,
    TextBlock,
    TextContent,
    UnknownBlock,
    block_color,
    block_icon,
    block_label,
    generate_block_id,
    validate,
)


# ── Kinds & display tables ───────────────────────────────────────────────────


def test_every_kind_has_icon_and_color():
    for kind in BlockKind:
        assert kind in BLOCK_ICONS
        assert kind in BLOCK_COLORS


def test_known_lookups():
    assert block_icon("text") == "📝"
    assert block_color("button") == "#EF4444"
    assert block_color(BlockKind.HEADER) == "#8B5CF6"


@pytest.mark.parametrize("tag", ["features", "", "TEXT", "carousel", None, 42, ["x"]])
def test_unknown_kind_falls_back(tag):
    assert block_icon(tag) == "📄"
    assert block_color(tag) == "#6B7280"


def test_lookup_accepts_block(simple_document):
    assert block_color(simple_document[1]) == "#EF4444"
    assert block_label(simple_document[1]) == "BUTTON"


def test_label_of_missing_kind():
    assert block_label("") == "BLOCK"
    assert block_label(BlockKind.HERO) == "HERO"


# ── Wire format ──────────────────────────────────────────────────────────────


def test_block_from_camel_case():
    doc = EmailDocument.model_validate(
        {
            "blocks": [
                {"id": "i", "blockType": "image", "content": {"imageUrl": "u", "imageAlt": "a"}},
                {"id": "t", "type": "text", "content": {"text": "legacy tag"}},
            ]
        }
    )
    assert isinstance(doc[0], ImageBlock)
    assert doc[0].content.image_url == "u"
    assert isinstance(doc[1], TextBlock)
    assert doc[1].kind is BlockKind.TEXT


def test_unknown_kind_is_representable():
    doc = EmailDocument.model_validate(
        {"blocks": [{"id": "f1", "blockType": "features", "content": {"title": "Why us"}}]}
    )
    block = doc[0]
    assert isinstance(block, UnknownBlock)
    assert block.kind is None
    assert block.content == {"title": "Why us"}
    assert block.model_dump(by_alias=True)["blockType"] == "features"


# ── Document invariants ──────────────────────────────────────────────────────


def test_document_must_not_be_empty():
    with pytest.raises(ValidationError):
        EmailDocument(blocks=[])


def test_block_id_is_required():
    with pytest.raises(ValidationError):
        TextBlock(content=TextContent(text="no id"))
    with pytest.raises(ValidationError):
        TextBlock(id="", content=TextContent(text="empty id"))


def test_block_ids_are_unique():
    with pytest.raises(ValidationError):
        EmailDocument(blocks=[TextBlock(id="a"), TextBlock(id="a")])


def test_document_sequence_access(simple_document):
    assert len(simple_document) == 2
    assert [b.id for b in simple_document] == ["text-1", "button-1"]
    assert simple_document.block_ids() == ["text-1", "button-1"]
    assert simple_document.block("button-1").content.text == "Go"
    assert simple_document.block("missing") is None


# ── Whole-block mutations ────────────────────────────────────────────────────


def test_replace_block_returns_new_document(simple_document):
    updated = simple_document.replace_block(TextBlock(id="text-1", content=TextContent(text="Bye")))
    assert updated.block("text-1").content.text == "Bye"
    assert simple_document.block("text-1").content.text == "Hello"
    assert updated.block_ids() == simple_document.block_ids()


def test_replace_unknown_block_raises(simple_document):
    with pytest.raises(KeyError):
        simple_document.replace_block(TextBlock(id="nope"))


def test_insert_and_remove(simple_document):
    inserted = simple_document.insert_block(1, TextBlock(id="text-2"))
    assert inserted.block_ids() == ["text-1", "text-2", "button-1"]

    removed = inserted.remove_block("text-1")
    assert removed.block_ids() == ["text-2", "button-1"]


def test_insert_duplicate_id_rejected(simple_document):
    with pytest.raises(ValidationError):
        simple_document.insert_block(0, TextBlock(id="text-1"))


def test_removing_last_block_rejected():
    doc = EmailDocument(blocks=[TextBlock(id="only")])
    with pytest.raises(ValidationError):
        doc.remove_block("only")


# ── Ids & validation ─────────────────────────────────────────────────────────


def test_generate_block_id():
    assert generate_block_id("text", []) == "text-1"
    assert generate_block_id(BlockKind.TEXT, ["text-1", "text-2"]) == "text-3"
    assert generate_block_id("hero", ["text-1"]) == "hero-1"


def test_validate_reports_content_problems():
    doc = EmailDocument(
        blocks=[
            ImageBlock(id="i", order_id=1),
            ButtonBlock(id="b", order_id=1, content=ButtonContent(text="")),
            TextBlock(id="t", content=TextContent(text="  ")),
            UnknownBlock(id="u", block_type="features"),
        ]
    )
    result = validate(doc)

    assert not result.is_valid
    error_fields = sorted((e.block_id, e.field) for e in result.errors)
    assert error_fields == [("b", "orderId"), ("b", "text"), ("i", "imageUrl"), ("i", "orderId")]
    warning_ids = [w.block_id for w in result.warnings]
    assert warning_ids == ["t", "u"]


def test_validate_clean_document(full_document):
    assert validate(full_document).is_valid
