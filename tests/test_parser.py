"""Reading stored documents back: classification, repair, markup recovery, fallbacks."""

import json

import pytest

from mailcanvas.blocks import EmailDocument, TextBlock, UnknownBlock
from mailcanvas.converter import (
    EncodedSource,
    MarkupSource,
    StructuredSource,
    classify,
    markup_to_document,
    parse,
    render,
    render_email,
    render_source,
    to_structure,
)


def _summary(document: EmailDocument) -> list[tuple]:
    return [(b.id, b.block_type, b.content) for b in document]


# ── classify ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value, kind",
    [
        ({"blocks": []}, "structured"),
        ([{"id": "a"}], "structured"),
        ('{"blocks": []}', "encoded"),
        ("not json", "encoded"),
        (b'{"blocks": []}', "encoded"),
        ("  <table></table>", "markup"),
        (3.5, "markup"),
        (None, "markup"),
    ],
)
def test_classify_is_total(value, kind):
    assert classify(value).kind == kind


def test_classify_keeps_document_and_variants(simple_document):
    assert isinstance(classify(simple_document), StructuredSource)
    source = EncodedSource(text="{}")
    assert classify(source) is source
    assert classify(object()) == MarkupSource(markup="")


# ── Structured round trip ────────────────────────────────────────────────────


def test_structure_round_trip(full_document):
    data = to_structure(full_document)

    assert _summary(parse(data)) == _summary(full_document)
    assert _summary(parse(json.dumps(data))) == _summary(full_document)
    assert parse(data).subject == "Spring Sale"


def test_parse_document_passes_through(simple_document):
    assert parse(simple_document) is simple_document


def test_bare_block_list():
    doc = parse([{"id": "t", "blockType": "text", "content": {"text": "hi"}}])
    assert doc.block_ids() == ["t"]


def test_order_id_sorts_blocks():
    doc = parse(
        {
            "blocks": [
                {"id": "b", "blockType": "text", "orderId": 2},
                {"id": "a", "blockType": "text", "orderId": 1},
            ]
        }
    )
    assert doc.block_ids() == ["a", "b"]


def test_partial_order_ids_keep_sequence():
    doc = parse(
        {
            "blocks": [
                {"id": "b", "blockType": "text", "orderId": 2},
                {"id": "a", "blockType": "text"},
            ]
        }
    )
    assert doc.block_ids() == ["b", "a"]


# ── Repair ───────────────────────────────────────────────────────────────────


def test_missing_and_duplicate_ids_are_regenerated():
    doc = parse(
        {
            "blocks": [
                {"blockType": "text", "content": {"text": "a"}},
                {"id": "text-1", "blockType": "text", "content": {"text": "b"}},
                "junk",
                42,
            ]
        }
    )
    assert doc.block_ids() == ["text-2", "text-1"]
    assert doc.block("text-1").content.text == "b"
    assert doc.block("text-2").content.text == "a"


def test_repeated_ids_do_not_steal_later_ids():
    doc = parse(
        {
            "blocks": [
                {"id": "a", "blockType": "text", "content": {"text": "first"}},
                {"id": "a", "blockType": "text", "content": {"text": "second"}},
                {"id": "text-1", "blockType": "text", "content": {"text": "third"}},
            ]
        }
    )
    assert doc.block_ids() == ["a", "text-2", "text-1"]
    assert doc.block("text-1").content.text == "third"


def test_unreadable_blocks_are_skipped():
    doc = parse(
        {
            "blocks": [
                {"id": "bad", "blockType": "image", "content": {"imageWidth": "wide"}},
                {"id": "ok", "blockType": "text"},
            ]
        }
    )
    assert doc.block_ids() == ["ok"]


def test_unknown_kinds_survive():
    doc = parse({"blocks": [{"id": "f", "blockType": "features", "content": {"items": [1, 2]}}]})
    assert isinstance(doc[0], UnknownBlock)
    assert doc[0].content == {"items": [1, 2]}


def test_bad_metadata_is_dropped():
    doc = parse({"blocks": [{"id": "t", "blockType": "text"}], "metadata": "nonsense"})
    assert doc.block_ids() == ["t"]
    assert doc.metadata is None


# ── Malformed input ──────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value",
    [
        None,
        42,
        "",
        "{bad json",
        "plain words",
        "[1, 2, 3]",
        {"blocks": "nope"},
        {"blocks": []},
        {"blocks": [None, "x"]},
        {"nothing": True},
        b"\xff\xfe",
        "<p>no block markers</p>",
        "[" * 5000,
    ],
)
def test_malformed_input_degrades_to_none(value):
    assert parse(value) is None


# ── Markup recovery ──────────────────────────────────────────────────────────


def test_markup_recovers_blocks(full_document):
    recovered = parse(render_email(full_document))

    assert _summary(recovered) == _summary(full_document)
    assert recovered.subject == "Spring Sale"


def test_markup_rerenders_identically(simple_document):
    html = render(simple_document)
    assert render(parse(html)) == html


def test_markup_unescapes_text():
    doc = EmailDocument(blocks=[TextBlock(id="t", content={"text": "Fish & Chips <3"})])
    recovered = markup_to_document(render(doc))
    assert recovered[0].content.text == "Fish & Chips <3"


def test_hand_written_markup():
    markup = """
    <div data-block-id="h" data-block-type="hero" style="text-align: left; color: #111">
      <h2>Big   news</h2><p>Read on</p>
    </div>
    <div data-block-id="x" data-block-type="widget">Something else</div>
    """
    doc = parse(markup)

    assert doc.block_ids() == ["h", "x"]
    assert doc[0].content.headline == "Big news"
    assert doc[0].content.subheadline == "Read on"
    assert doc[0].styles.text_align == "left"
    assert doc[0].styles.text_color == "#111"
    assert isinstance(doc[1], UnknownBlock)
    assert doc[1].content == {"text": "Something else"}


# ── render_source ────────────────────────────────────────────────────────────


def test_render_source_structured(simple_document):
    assert render_source(to_structure(simple_document)) == render(simple_document)
    assert render_source(json.dumps(to_structure(simple_document))) == render(simple_document)


def test_render_source_markup_is_returned_as_is():
    assert render_source("<p>raw</p>") == "<p>raw</p>"


def test_render_source_uses_fallback_markup():
    assert render_source("{bad", fallback_markup="<p>saved</p>") == "<p>saved</p>"
    assert render_source({"blocks": []}, fallback_markup="<p>saved</p>") == "<p>saved</p>"


def test_render_source_oversized_number_literal():
    digits = "1" * 5000
    assert render_source(digits) == digits
    assert render_source(digits, fallback_markup="<p>saved</p>") == "<p>saved</p>"
    assert parse(digits) is None
    assert parse('{"blocks": [{"id": "t", "orderId": ' + digits + "}]}") is None


def test_render_source_empty_region_at_worst():
    assert render_source(None) == render(None)
    assert render_source('{"blocks": 1}') == render(None)
    assert render_source({"x": 1}, fallback_markup=None) == render(None)
