# blocks/conversion/elements/pattern.py
"""<Pattern slug="hero" category="..."> <-> core/pattern"""

from .base import CustomElementHandler


class PatternHandler(CustomElementHandler):
    tag_name = "Pattern"
    block_type = "core/pattern"
    attributes = (
        ("slug", "slug"),
        ("category", "category"),
        ("class", "className"),
    )
