# blocks/conversion/elements/part.py
"""<Part slug="header" theme="..."> <-> core/template-part"""

from .base import CustomElementHandler


class PartHandler(CustomElementHandler):
    tag_name = "Part"
    block_type = "core/template-part"
    attributes = (
        ("slug", "slug"),
        ("theme", "theme"),
        ("class", "className"),
    )
