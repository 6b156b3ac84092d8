# blocks/conversion/markup_parser.py
"""
Comment markup -> Block parsing, the inverse of the serializer.

Recognises the three block comment forms:
    <!-- wp:name {json} /-->
    <!-- wp:name {json} -->
    <!-- /wp:name -->

Markup between comments (custom elements such as ``<Pattern>`` written by
their handlers, or hand-written HTML) is converted through ``html_to_blocks``.
Whitespace between comments carries no meaning.
"""

from __future__ import annotations

import json
import re
from typing import List, Optional

from .block import BLOCK_TYPE_PATTERN, Block
from .codec import decode_block_attributes
from .config import resolve_double_escape
from .parser import html_to_blocks
from .registry import HandlerRegistry, get_default_registry

_BLOCK_COMMENT_RE = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<name>" + BLOCK_TYPE_PATTERN + r")\s+"
    r"(?:(?P<attrs>\{.*?\})\s+)?(?P<void>/)?-->",
    re.DOTALL,
)


class BlockMarkupError(ValueError):
    """Raised for unbalanced block comments or unreadable attribute JSON."""


def parse_block_markup(
    markup,
    registry: Optional[HandlerRegistry] = None,
    double_escaped: Optional[bool] = None,
) -> List[Block]:
    """
    Parse block markup into top-level blocks.

    Args:
        markup: Block markup text; non-strings and blank text give []
        registry: Custom element handlers (default: the process-wide registry)
        double_escaped: Whether the markup was written with double-escaped
            backslashes. ``None`` uses settings.BLOCKS_DOUBLE_ESCAPE.

    Returns:
        List of blocks

    Raises:
        BlockMarkupError: Comments do not nest or attributes are not JSON
    """
    if not isinstance(markup, str) or not markup.strip():
        return []

    if registry is None:
        registry = get_default_registry()
    double_escaped = resolve_double_escape(double_escaped)

    stack: List[Block] = []
    result: List[Block] = []
    position = 0

    for match in _BLOCK_COMMENT_RE.finditer(markup):
        _collect_freeform(markup[position : match.start()], stack, result, registry)
        position = match.end()
        name = match.group("name")

        if match.group("closer"):
            if not stack:
                raise BlockMarkupError(f"Closing comment for '{name}' without an opening comment")
            if stack[-1].type != name:
                raise BlockMarkupError(
                    f"Closing comment for '{name}' does not match open block '{stack[-1].type}'"
                )
            _append(stack.pop(), stack, result)
            continue

        try:
            attributes = decode_block_attributes(match.group("attrs") or "", double_escaped)
        except json.JSONDecodeError as e:
            raise BlockMarkupError(f"Invalid attributes for block '{name}': {e}") from e
        if not isinstance(attributes, dict):
            raise BlockMarkupError(f"Attributes for block '{name}' must be a JSON object")

        block = Block(type=name, attributes=attributes)
        if match.group("void"):
            _append(block, stack, result)
        else:
            stack.append(block)

    _collect_freeform(markup[position:], stack, result, registry)

    if stack:
        raise BlockMarkupError(f"Block '{stack[-1].type}' is never closed")

    return result


def _append(block: Block, stack: List[Block], result: List[Block]) -> None:
    if stack:
        stack[-1].children.append(block)
    else:
        result.append(block)


def _collect_freeform(text: str, stack, result, registry) -> None:
    if not text.strip():
        return
    for block in html_to_blocks(text, registry=registry):
        _append(block, stack, result)
