# blocks/conversion/elements/base.py
"""
Base class for custom element handlers.

A handler translates one markup tag (``<Part>``, ``<Pattern>``...) to one
core block type and back. Subclasses declare the tag, the block type and
the attributes they understand as ``(markup name, block attribute)`` pairs;
anything else on the element is dropped.
"""

from __future__ import annotations

from typing import Tuple

from ..block import Block
from ..codec import attribute_text, escape_attribute


class CustomElementHandler:
    tag_name: str = ""
    block_type: str = ""
    # (markup attribute, block attribute) in output order
    attributes: Tuple[Tuple[str, str], ...] = ()

    def to_block(self, element) -> Block:
        """
        Convert a custom markup element to its block.

        Args:
            element: BeautifulSoup ``Tag`` for the custom element

        Returns:
            Block with the declared attributes that carry a value
        """
        block_attrs = {}
        for markup_name, block_name in self.attributes:
            value = attribute_text(element.get(markup_name))
            if value:
                block_attrs[block_name] = value
        return Block(type=self.block_type, attributes=block_attrs)

    def to_html(self, block: Block) -> str:
        """Convert a block of this handler's type back to its custom element."""
        attrs = block.attributes or {}
        parts = [f"<{self.tag_name}"]

        for markup_name, block_name in self.attributes:
            value = attrs.get(block_name)
            if value:
                parts.append(f' {markup_name}="{escape_attribute(value)}"')

        parts.append(f"></{self.tag_name}>")
        return "".join(parts)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.tag_name} <-> {self.block_type}>"
