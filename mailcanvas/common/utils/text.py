"""Text helpers shared by the HTML and image paths."""

import re
from typing import Any

_NON_ASCII = re.compile(r"[^\x00-\x7F]")
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_text(value: Any) -> str:
    """Strip non-ASCII characters (emoji, icons), collapse whitespace and trim.

    Total: ``None`` becomes ``""`` and any other object is converted with ``str()``.
    Applying it twice gives the same result as applying it once.

    Args:
        value (Any): The text to clean.

    Returns:
        str: ASCII-only text with single spaces and no leading/trailing whitespace.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        text = value
    else:
        try:
            text = str(value)
        except Exception:  # broken __str__, nothing to show
            return ""
    text = _NON_ASCII.sub("", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()
