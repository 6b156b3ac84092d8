"""
Conversion between markup and block documents.
"""

from .block import UNIVERSAL_ELEMENT, Block
from .markup_parser import BlockMarkupError, parse_block_markup
from .parser import html_to_blocks
from .registry import HandlerRegistry, get_default_registry
from .renderer import blocks_to_html
from .serializer import html_to_block_markup, serialize_block, serialize_blocks

__all__ = [
    'Block',
    'BlockMarkupError',
    'HandlerRegistry',
    'UNIVERSAL_ELEMENT',
    'blocks_to_html',
    'get_default_registry',
    'html_to_block_markup',
    'html_to_blocks',
    'parse_block_markup',
    'serialize_block',
    'serialize_blocks',
]
