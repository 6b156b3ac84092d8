"""Tests for pattern file generation."""

from django.test import override_settings

from blocks.conversion.pattern_file import (
    PatternMetadata,
    generate_pattern_metadata,
    html_to_pattern,
    render_pattern_file,
)


class TestGeneratePatternMetadata:
    def test_title_and_slug_from_filename(self):
        metadata = generate_pattern_metadata("hero-section")
        assert metadata.title == "Hero Section"
        assert metadata.slug == "hero-section"
        assert metadata.viewport_width == 1280
        assert metadata.inserter is True

    def test_slug_is_sanitised_and_namespaced(self):
        metadata = generate_pattern_metadata("Call_To Action", namespace="mytheme")
        assert metadata.slug == "mytheme/call-to-action"

    def test_explicit_values_win(self):
        metadata = generate_pattern_metadata(
            "x", title="Custom", slug="custom-slug", viewport_width=800
        )
        assert (metadata.title, metadata.slug, metadata.viewport_width) == (
            "Custom",
            "custom-slug",
            800,
        )

    def test_namespace_default_from_settings(self):
        with override_settings(BLOCKS_PATTERN_NAMESPACE="blank"):
            assert generate_pattern_metadata("footer").slug == "blank/footer"


def test_render_pattern_file_header():
    metadata = PatternMetadata(
        title="Hero",
        slug="theme/hero",
        description="Big banner",
        categories=["featured", "banner"],
        keywords=["hero"],
        post_types=["page"],
        inserter=False,
    )
    assert render_pattern_file(metadata, "<!-- wp:core/x /-->") == "\n".join(
        [
            "<?php",
            "/**",
            " * Title: Hero",
            " * Slug: theme/hero",
            " * Description: Big banner",
            " * Categories: featured, banner",
            " * Keywords: hero",
            " * Viewport Width: 1280",
            " * Post Types: page",
            " * Inserter: false",
            " */",
            "?>",
            "<!-- wp:core/x /-->",
        ]
    )


def test_html_to_pattern(registry):
    php = html_to_pattern(
        '<section><Pattern slug="cta"></Pattern></section>',
        "hero-section",
        registry=registry,
        categories=["featured"],
    )
    assert php.startswith("<?php\n/**\n * Title: Hero Section\n * Slug: hero-section\n")
    assert " * Categories: featured\n" in php
    assert php.endswith(
        '?>\n<!-- wp:universal/element {"tagName":"section"} -->\n'
        '<Pattern slug="cta"></Pattern>\n'
        "<!-- /wp:universal/element -->"
    )
