# blocks/templatetags/block_tags.py

from django import template
from django.utils.safestring import mark_safe

from blocks.conversion import blocks_to_html, html_to_block_markup, parse_block_markup
from blocks.conversion.config import resolve_double_escape
from blocks.markdown import markdown_to_block_markup

register = template.Library()


@register.filter(name="block_markup")
def block_markup_filter(value, context="content"):
    """HTML -> block markup. ``{{ html|block_markup:"page" }}`` selects page escaping."""
    return html_to_block_markup(value, double_escape=resolve_double_escape(context=context))


@register.filter(name="render_blocks")
def render_blocks_filter(value, context="content"):
    """Render stored block markup as HTML"""
    blocks = parse_block_markup(value, double_escaped=resolve_double_escape(context=context))
    return mark_safe(blocks_to_html(blocks))


@register.filter(name="markdown_blocks")
def markdown_blocks_filter(value):
    return markdown_to_block_markup(value)
