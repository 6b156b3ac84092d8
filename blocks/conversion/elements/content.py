# blocks/conversion/elements/content.py
"""<Content> <-> core/post-content, the slot where a post's own blocks render."""

from .base import CustomElementHandler


class ContentHandler(CustomElementHandler):
    tag_name = "Content"
    block_type = "core/post-content"
    attributes = (("class", "className"),)
