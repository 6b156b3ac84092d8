# blocks/conversion/codec.py
"""
Attribute codec shared by the parser, the serializer and every custom element.

This module owns:
- HTML attribute value escaping for handler output and the HTML renderer
- The inline ``style`` -> ``data-style`` rewrite (a live ``style`` attribute
  breaks the block editor preview, so it never reaches a block)
- Restoring the camelCase spelling of templating directives that the
  document parser lowercases
- The JSON attribute segment written into block comments, with the
  selectable backslash double-escaping policy
- Keeping "--" out of that segment, so attribute values never end the
  comment that carries them
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict

from django.utils.html import escape

STYLE_ATTRIBUTE = "style"
DATA_STYLE_ATTRIBUTE = "data-style"

# Control attributes consumed by the theme's templating layer. They are
# ordinary attributes here; only their spelling is restored.
TEMPLATING_DIRECTIVES = {
    "loopsource": "loopSource",
    "loopvariable": "loopVariable",
    "conditionalvisibility": "conditionalVisibility",
    "conditionalexpression": "conditionalExpression",
    "setvariable": "setVariable",
    "setexpression": "setExpression",
}

COMMENT_DASHES_ESCAPE = "\\u002d\\u002d"

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9\-_]")


def escape_attribute(value: Any) -> str:
    """
    Escape a value for use inside a double-quoted markup attribute.

    ``&`` is replaced first, then ``"``, ``'``, ``<`` and ``>``, so entities
    produced here are never encoded a second time.
    """
    return escape(value)


def escape_attribute_name(name: str) -> str:
    """Strip everything but letters, digits, hyphens and underscores."""
    return _INVALID_NAME_CHARS.sub("", name)


def attribute_text(value: Any) -> str:
    """
    Return an attribute value as a single string.

    BeautifulSoup hands back multi-valued attributes (``class``, ``rel``...)
    as lists unless told otherwise.
    """
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)


def element_attributes(element) -> Dict[str, str]:
    """
    Build the generic attribute bag for a markup element.

    Attributes keep document order. ``style`` is moved to ``data-style`` at
    the same position and wins over an explicit ``data-style`` attribute.
    Templating directives get their camelCase names back; their values are
    left as plain strings.
    """
    attrs = element.attrs or {}
    has_style = STYLE_ATTRIBUTE in attrs
    bag: Dict[str, str] = {}

    for name, value in attrs.items():
        if name == DATA_STYLE_ATTRIBUTE and has_style:
            continue
        if name == STYLE_ATTRIBUTE:
            bag[DATA_STYLE_ATTRIBUTE] = attribute_text(value)
            continue
        bag[TEMPLATING_DIRECTIVES.get(name.lower(), name)] = attribute_text(value)

    return bag


def encode_block_attributes(attributes: Dict[str, Any], double_escape: bool) -> str:
    """
    Encode a block's attribute bag as the JSON segment of a block comment.

    Args:
        attributes: Ordered attribute mapping
        double_escape: Escape every backslash of the JSON text once more.
            Content that carries escaped code samples needs this; page
            markup with only structural content does not.

    Returns:
        Compact JSON text, or an empty string for an empty bag
    """
    if not attributes:
        return ""

    encoded = json.dumps(attributes, ensure_ascii=False, separators=(",", ":"))
    # A literal "--" could close the surrounding comment early
    encoded = encoded.replace("--", COMMENT_DASHES_ESCAPE)
    if double_escape:
        encoded = encoded.replace("\\", "\\\\")
    return encoded


def decode_block_attributes(text: str, double_escaped: bool) -> Dict[str, Any]:
    """Inverse of :func:`encode_block_attributes`."""
    if not text:
        return {}
    if double_escaped:
        text = text.replace("\\\\", "\\")
    return json.loads(text)
