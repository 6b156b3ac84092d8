# blocks/conversion/serializer.py
"""
Block -> comment markup serialization.

Output format:
    <!-- wp:{type}{ attrs} /-->                        (no children)
    <!-- wp:{type}{ attrs} -->
    {children, one per line}
    <!-- /wp:{type} -->                                  (children)

Blocks whose type belongs to a custom element handler are written by that
handler in its own surface syntax instead.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .block import Block
from .codec import encode_block_attributes
from .config import resolve_double_escape
from .parser import html_to_blocks
from .registry import HandlerRegistry, get_default_registry


def serialize_blocks(
    blocks: Iterable[Block],
    registry: Optional[HandlerRegistry] = None,
    double_escape: Optional[bool] = None,
) -> str:
    """
    Serialize top-level blocks, separated by a blank line.

    Args:
        blocks: List of blocks; anything that is not a list or tuple gives ""
        registry: Custom element handlers (default: the process-wide registry)
        double_escape: Backslash policy for the whole call. ``None`` uses
            settings.BLOCKS_DOUBLE_ESCAPE.

    Returns:
        Block markup
    """
    if not isinstance(blocks, (list, tuple)):
        return ""

    if registry is None:
        registry = get_default_registry()
    double_escape = resolve_double_escape(double_escape)

    return "\n\n".join(
        _serialize(block, registry, double_escape) for block in blocks
    )


def serialize_block(
    block: Block,
    registry: Optional[HandlerRegistry] = None,
    double_escape: Optional[bool] = None,
) -> str:
    if registry is None:
        registry = get_default_registry()
    return _serialize(block, registry, resolve_double_escape(double_escape))


def html_to_block_markup(
    markup,
    double_escape: Optional[bool] = None,
    registry: Optional[HandlerRegistry] = None,
    text_content: bool = False,
) -> str:
    """Parse markup and serialize the resulting blocks in one call."""
    if registry is None:
        registry = get_default_registry()
    blocks = html_to_blocks(markup, registry=registry, text_content=text_content)
    return serialize_blocks(blocks, registry=registry, double_escape=double_escape)


def _serialize(block: Block, registry: HandlerRegistry, double_escape: bool) -> str:
    handler = registry.lookup_by_block_type(block.type)
    if handler is not None:
        return handler.to_html(block)

    attrs = encode_block_attributes(block.attributes, double_escape)
    segment = f" {attrs}" if attrs else ""

    if block.is_self_closing:
        return f"<!-- wp:{block.type}{segment} /-->"

    inner = "\n".join(
        _serialize(child, registry, double_escape) for child in block.children
    )
    return f"<!-- wp:{block.type}{segment} -->\n{inner}\n<!-- /wp:{block.type} -->"
