"""Tests for the block_tags template filters."""

from django.template import Context, Template
from django.utils.safestring import SafeString

from blocks.markdown import renderer
from blocks.templatetags.block_tags import (
    block_markup_filter,
    markdown_blocks_filter,
    render_blocks_filter,
)


def test_block_markup_filter():
    assert block_markup_filter('<p class="x"></p>') == (
        '<!-- wp:universal/element {"tagName":"p","class":"x"} /-->'
    )


def test_block_markup_filter_context_selects_escaping():
    html = '<div data-path="C:\\temp"></div>'
    assert r'"C:\\\\temp"' in block_markup_filter(html)
    assert r'"C:\\temp"' in block_markup_filter(html, "page")


def test_render_blocks_filter_is_safe():
    markup = (
        '<!-- wp:universal/element {"tagName":"p","data-style":"color:red","textContent":"Hi"} /-->'
    )
    html = render_blocks_filter(markup)
    assert html == '<p style="color:red">Hi</p>'
    assert isinstance(html, SafeString)


def test_render_blocks_in_template():
    template = Template("{% load block_tags %}{{ value|render_blocks }}")
    markup = '<!-- wp:core/template-part {"slug":"header"} /-->'
    assert template.render(Context({"value": markup})) == '<Part slug="header"></Part>'


def test_markdown_blocks_filter(monkeypatch):
    monkeypatch.setattr(renderer.pypandoc, "convert_text", lambda text, **kwargs: "<p>Hi</p>")
    assert markdown_blocks_filter("Hi") == (
        '<!-- wp:universal/element {"tagName":"p","textContent":"Hi"} /-->'
    )
