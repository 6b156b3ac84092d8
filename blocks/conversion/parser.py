# blocks/conversion/parser.py
"""
Markup -> Block conversion.

Walks a BeautifulSoup tree depth-first. Each element is resolved through the
handler registry: a registered custom element (``<Part>``, ``<Pattern>``,
``<Content>``) becomes its core block, anything else becomes a
``universal/element`` block that carries the tag name and the element's
attributes, with the element's child elements converted recursively.

Text and comment nodes are not blocks. Hosts that need text to survive
(markdown content, for example) enable ``text_content``, which stores the
text of leaf elements in the block attributes instead.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from .block import UNIVERSAL_ELEMENT, Block
from .codec import element_attributes
from .registry import HandlerRegistry, get_default_registry

TAG_NAME_KEY = "tagName"
TEXT_CONTENT_KEY = "textContent"
INNER_HTML_KEY = "innerHTML"

# Elements whose inner markup is kept as-is in text-leaf mode
RAW_CONTENT_ELEMENTS = {"svg", "script", "code", "pre", "style"}

# Elements whose whitespace is significant
PRESERVE_WHITESPACE_ELEMENTS = {"pre", "code", "kbd", "samp", "var"}

_WHITESPACE_RE = re.compile(r"\s+")


def html_to_blocks(
    markup,
    registry: Optional[HandlerRegistry] = None,
    text_content: bool = False,
) -> List[Block]:
    """
    Convert markup to a list of top-level blocks.

    Args:
        markup: HTML string, BeautifulSoup document or Tag. Anything else
            (``None``, placeholders) yields an empty list.
        registry: Custom element handlers (default: the process-wide registry)
        text_content: Keep the text of leaf elements as block attributes

    Returns:
        Blocks for the root's top-level elements, in document order
    """
    root = _document_root(markup)
    if root is None:
        return []

    if registry is None:
        registry = get_default_registry()

    blocks = []
    for node in root.children:
        if isinstance(node, Tag):
            blocks.append(element_to_block(node, registry, text_content))
        elif text_content and _is_text(node) and node.strip():
            # Loose top-level text is wrapped the way a browser editor would
            blocks.append(
                Block(
                    type=UNIVERSAL_ELEMENT,
                    attributes={
                        TAG_NAME_KEY: "p",
                        TEXT_CONTENT_KEY: _collapse_whitespace(str(node)),
                    },
                )
            )
    return blocks


def element_to_block(
    element: Tag,
    registry: HandlerRegistry,
    text_content: bool = False,
) -> Block:
    """Convert one element (and, for generic elements, its subtree)."""
    handler = registry.lookup_by_tag(element.name)
    if handler is not None:
        block = handler.to_block(element)
        # The registry entry decides the block type, not the handler output
        if block.type != handler.block_type:
            block = replace(block, type=handler.block_type)
        return block

    tag = element.name.lower()
    attributes = {TAG_NAME_KEY: tag}
    attributes.update(element_attributes(element))

    if text_content:
        kind = _content_kind(element, tag)
        if kind == "html":
            inner = element.decode_contents()
            if tag not in PRESERVE_WHITESPACE_ELEMENTS:
                inner = _collapse_whitespace(inner)
            if inner:
                attributes[INNER_HTML_KEY] = inner
            return Block(type=UNIVERSAL_ELEMENT, attributes=attributes)
        if kind == "text":
            text = element.get_text()
            if tag not in PRESERVE_WHITESPACE_ELEMENTS:
                text = _collapse_whitespace(text)
            attributes[TEXT_CONTENT_KEY] = text
            return Block(type=UNIVERSAL_ELEMENT, attributes=attributes)

    children = [
        element_to_block(child, registry, text_content)
        for child in element.children
        if isinstance(child, Tag)
    ]
    return Block(type=UNIVERSAL_ELEMENT, attributes=attributes, children=children)


def _document_root(markup) -> Optional[Tag]:
    if isinstance(markup, str):
        markup = markup.strip()
        if not markup:
            return None
        markup = BeautifulSoup(markup, "html.parser")
    elif not isinstance(markup, Tag):
        return None

    if isinstance(markup, BeautifulSoup):
        body = markup.find("body")
        if body is not None:
            return body
    return markup


def _content_kind(element: Tag, tag: str) -> str:
    """Classify an element as 'html', 'text', 'blocks' or 'empty'."""
    if tag in RAW_CONTENT_ELEMENTS:
        return "html"

    has_elements = False
    has_text = False
    for node in element.children:
        if isinstance(node, Tag):
            has_elements = True
        elif _is_text(node) and node.strip():
            has_text = True

    if has_elements and has_text:
        return "html"
    if has_elements:
        return "blocks"
    if has_text:
        return "text"
    return "empty"


def _is_text(node) -> bool:
    # Comments, doctypes and CDATA are NavigableString subclasses
    return type(node) is NavigableString


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()
