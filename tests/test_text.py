import re

import pytest

from mailcanvas.converter import sanitize_text

SAMPLES = [
    "Q4 Launch 🚀",
    "  spaced \t\n out  ",
    "Café  ☕ menu",
    "🚀🚀🚀",
    "",
    "already clean",
    "tabs\tand\r\nnewlines",
    "non breaking",
]


def test_strips_emoji_only():
    assert sanitize_text("Q4 Launch 🚀") == "Q4 Launch"
    assert sanitize_text("jane@x.com") == "jane@x.com"


def test_collapses_whitespace():
    assert sanitize_text("  a\t\n b  ") == "a b"
    assert sanitize_text("Café  ☕ menu") == "Caf menu"


def test_total_on_odd_input():
    assert sanitize_text(None) == ""
    assert sanitize_text(123) == "123"
    assert sanitize_text("🚀") == ""


@pytest.mark.parametrize("value", SAMPLES)
def test_idempotent(value):
    once = sanitize_text(value)
    assert sanitize_text(once) == once


@pytest.mark.parametrize("value", SAMPLES)
def test_output_is_ascii_single_spaced(value):
    out = sanitize_text(value)
    assert all(ord(ch) < 128 for ch in out)
    assert not re.search(r"\s{2,}", out)
    assert out == out.strip()
