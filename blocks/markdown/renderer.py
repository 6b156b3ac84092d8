# blocks/markdown/renderer.py

import logging

import pypandoc

from blocks.conversion.config import resolve_double_escape
from blocks.conversion.serializer import html_to_block_markup

from .config import get_pandoc_config
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

BLOCK_MARKUP_PREFIX = "<!-- wp:"


def render_markdown(text, context=None):
    """
    Render markdown to HTML with pypandoc.

    Args:
        text: Raw markdown text
        context: Optional dict shared with preprocessors
    """
    context = context if context is not None else {}
    return _convert_markdown(apply_preprocessors(text, context))


def markdown_to_block_markup(text, context=None, double_escape=None, registry=None):
    """
    Convert a markdown content file to block markup.

    Content is serialized in the content context: code samples in the text
    carry backslashes, so the policy defaults to double escaping. Text that
    already starts with block markup is returned unchanged.
    """
    if not isinstance(text, str) or not text.strip():
        return ""

    context = context if context is not None else {}
    body = apply_preprocessors(text, context)
    if body.lstrip().startswith(BLOCK_MARKUP_PREFIX):
        logger.debug("Content already has block markup, skipping conversion")
        return body

    html = _convert_markdown(body)
    logger.debug(f"Rendered markdown to {len(html)} characters of HTML")

    return html_to_block_markup(
        html,
        double_escape=resolve_double_escape(double_escape, context="content"),
        registry=registry,
        text_content=True,
    )


def _convert_markdown(text):
    pandoc_config = get_pandoc_config()
    return pypandoc.convert_text(
        text,
        to=pandoc_config["to"],
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config["filters"],
    )
