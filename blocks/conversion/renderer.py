# blocks/conversion/renderer.py
"""
Block -> HTML rendering.

Turns block trees back into the hand-editable source HTML a theme keeps
under ``src/``: custom blocks become their custom elements, universal
elements become ordinary tags. ``data-style`` is written back as ``style``
here, since source HTML is never loaded into the block editor.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .block import UNIVERSAL_ELEMENT, Block
from .codec import DATA_STYLE_ATTRIBUTE, STYLE_ATTRIBUTE, escape_attribute, escape_attribute_name
from .parser import INNER_HTML_KEY, TAG_NAME_KEY, TEXT_CONTENT_KEY
from .registry import HandlerRegistry, get_default_registry

VOID_ELEMENTS = {
    "img",
    "br",
    "hr",
    "input",
    "meta",
    "link",
    "area",
    "base",
    "col",
    "embed",
    "source",
    "track",
    "wbr",
}

_CONTENT_KEYS = {TAG_NAME_KEY, TEXT_CONTENT_KEY, INNER_HTML_KEY}


def blocks_to_html(
    blocks: Iterable[Block],
    registry: Optional[HandlerRegistry] = None,
) -> str:
    """
    Render blocks as HTML, one top-level element per line.

    Block types that are neither custom nor universal elements have no HTML
    source form and render as an empty string.
    """
    if not isinstance(blocks, (list, tuple)):
        return ""

    if registry is None:
        registry = get_default_registry()

    rendered = (render_block(block, registry) for block in blocks)
    return "\n".join(html for html in rendered if html)


def render_block(block: Block, registry: HandlerRegistry) -> str:
    handler = registry.lookup_by_block_type(block.type)
    if handler is not None:
        return handler.to_html(block)

    if block.type != UNIVERSAL_ELEMENT:
        return ""

    attrs = block.attributes or {}
    tag = escape_attribute_name(str(attrs.get(TAG_NAME_KEY) or "div")).lower() or "div"
    attributes_string = _render_attributes(attrs)

    if tag in VOID_ELEMENTS:
        return f"<{tag}{attributes_string} />"

    if INNER_HTML_KEY in attrs:
        inner = str(attrs[INNER_HTML_KEY])
    elif TEXT_CONTENT_KEY in attrs:
        inner = escape_attribute(attrs[TEXT_CONTENT_KEY])
    else:
        inner = blocks_to_html(block.children, registry)

    return f"<{tag}{attributes_string}>{inner}</{tag}>"


def _render_attributes(attrs: dict) -> str:
    parts = []
    for name, value in attrs.items():
        if name in _CONTENT_KEYS or value is None:
            continue
        if name == DATA_STYLE_ATTRIBUTE:
            name = STYLE_ATTRIBUTE
        name = escape_attribute_name(name)
        if not name:
            continue
        if value == "" or value is True:
            # Boolean attributes such as disabled or hidden
            parts.append(f" {name}")
        elif value is False:
            continue
        else:
            parts.append(f' {name}="{escape_attribute(value)}"')
    return "".join(parts)
