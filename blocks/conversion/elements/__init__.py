# blocks/conversion/elements/__init__.py

from .base import CustomElementHandler
from .content import ContentHandler
from .part import PartHandler
from .pattern import PatternHandler

# The closed set of translators shipped with the app. Projects can narrow or
# extend it through settings.BLOCKS_CUSTOM_ELEMENTS, read once at startup.
BUILTIN_HANDLERS = (
    PartHandler,  # <Part> <-> core/template-part
    PatternHandler,  # <Pattern> <-> core/pattern
    ContentHandler,  # <Content> <-> core/post-content
)

__all__ = [
    "BUILTIN_HANDLERS",
    "ContentHandler",
    "CustomElementHandler",
    "PartHandler",
    "PatternHandler",
]
