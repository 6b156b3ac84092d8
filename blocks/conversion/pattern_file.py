# blocks/conversion/pattern_file.py
"""
Block pattern files.

A pattern file is a PHP file whose doc comment header (Title, Slug,
Categories...) registers the pattern, followed by the pattern's block markup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .config import get_conversion_config, resolve_double_escape
from .serializer import html_to_block_markup

_SLUG_INVALID_RE = re.compile(r"[^a-z0-9-]")
_WORD_START_RE = re.compile(r"\b\w")


@dataclass
class PatternMetadata:
    title: str
    slug: str
    description: str = ""
    categories: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    viewport_width: Optional[int] = 1280
    block_types: List[str] = field(default_factory=list)
    post_types: List[str] = field(default_factory=list)
    inserter: bool = True


def generate_pattern_metadata(
    filename: str,
    title: Optional[str] = None,
    slug: Optional[str] = None,
    namespace: Optional[str] = None,
    description: str = "",
    categories: Optional[List[str]] = None,
    keywords: Optional[List[str]] = None,
    viewport_width: Optional[int] = None,
    block_types: Optional[List[str]] = None,
    post_types: Optional[List[str]] = None,
    inserter: bool = True,
) -> PatternMetadata:
    """
    Derive pattern metadata from a file name.

    ``hero-section`` gives the title "Hero Section" and the slug
    ``hero-section`` (``mytheme/hero-section`` with a namespace).
    """
    config = get_conversion_config()

    if not title:
        title = _WORD_START_RE.sub(lambda m: m.group(0).upper(), filename.replace("-", " "))
    if not slug:
        slug = _SLUG_INVALID_RE.sub("-", filename.lower())

    namespace = namespace or config["pattern_namespace"]
    if namespace:
        slug = f"{namespace}/{slug}"

    return PatternMetadata(
        title=title,
        slug=slug,
        description=description or "",
        categories=list(categories or []),
        keywords=list(keywords or []),
        viewport_width=viewport_width or config["pattern_viewport_width"],
        block_types=list(block_types or []),
        post_types=list(post_types or []),
        inserter=inserter,
    )


def render_pattern_file(metadata: PatternMetadata, block_markup: str) -> str:
    lines = ["<?php", "/**"]
    lines.append(f" * Title: {metadata.title}")
    lines.append(f" * Slug: {metadata.slug}")

    if metadata.description:
        lines.append(f" * Description: {metadata.description}")
    if metadata.categories:
        lines.append(f" * Categories: {', '.join(metadata.categories)}")
    if metadata.keywords:
        lines.append(f" * Keywords: {', '.join(metadata.keywords)}")
    if metadata.viewport_width:
        lines.append(f" * Viewport Width: {metadata.viewport_width}")
    if metadata.block_types:
        lines.append(f" * Block Types: {', '.join(metadata.block_types)}")
    if metadata.post_types:
        lines.append(f" * Post Types: {', '.join(metadata.post_types)}")

    lines.append(f" * Inserter: {'true' if metadata.inserter else 'false'}")
    lines.append(" */")
    lines.append("?>")
    lines.append(block_markup)

    return "\n".join(lines)


def html_to_pattern(html: str, filename: str, double_escape=None, registry=None, **options) -> str:
    """
    Convert HTML to a complete pattern file.

    Args:
        html: Source HTML
        filename: Pattern file name without extension
        double_escape: Backslash policy (default: settings.BLOCKS_PATTERN_DOUBLE_ESCAPE)
        registry: Custom element handlers (default: the process-wide registry)
        **options: Passed to :func:`generate_pattern_metadata`

    Returns:
        PHP pattern file content
    """
    markup = html_to_block_markup(
        html,
        double_escape=resolve_double_escape(double_escape, context="pattern"),
        registry=registry,
    )
    metadata = generate_pattern_metadata(filename, **options)
    return render_pattern_file(metadata, markup)
