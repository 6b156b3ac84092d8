# blocks/conversion/config.py

from django.conf import settings

DEFAULT_CUSTOM_ELEMENTS = [
    "blocks.conversion.elements.PartHandler",
    "blocks.conversion.elements.PatternHandler",
    "blocks.conversion.elements.ContentHandler",
]


def get_conversion_config():
    """
    Configuration for block conversion, read from Django settings.

    Content blocks may carry escaped code samples and are double-escaped by
    default. Page markup (structural elements, inline SVG) is pushed with
    single escaping. Pattern files follow the content default.
    """
    return {
        "custom_elements": list(
            getattr(settings, "BLOCKS_CUSTOM_ELEMENTS", DEFAULT_CUSTOM_ELEMENTS)
        ),
        "double_escape": getattr(settings, "BLOCKS_DOUBLE_ESCAPE", True),
        "page_double_escape": getattr(settings, "BLOCKS_PAGE_DOUBLE_ESCAPE", False),
        "pattern_double_escape": getattr(settings, "BLOCKS_PATTERN_DOUBLE_ESCAPE", True),
        "pattern_namespace": getattr(settings, "BLOCKS_PATTERN_NAMESPACE", None),
        "pattern_viewport_width": getattr(settings, "BLOCKS_PATTERN_VIEWPORT_WIDTH", 1280),
    }


def resolve_double_escape(double_escape=None, context=None):
    """
    Pick the escaping policy for one serialization call.

    An explicit boolean wins. Otherwise ``context`` selects the policy:
    ``"page"``, ``"pattern"`` or ``"content"`` (the default).
    """
    if double_escape is not None:
        return bool(double_escape)

    config = get_conversion_config()
    if context == "page":
        return bool(config["page_double_escape"])
    if context == "pattern":
        return bool(config["pattern_double_escape"])
    return bool(config["double_escape"])
