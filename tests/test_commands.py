"""Tests for the conversion management commands."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from blocks.management.files import default_output_dir
from blocks.markdown import renderer

HEADER_HTML = '<header class="site"><Part slug="nav"></Part></header>'
HEADER_MARKUP = (
    '<!-- wp:universal/element {"tagName":"header","class":"site"} -->\n'
    '<Part slug="nav"></Part>\n'
    "<!-- /wp:universal/element -->\n"
)


@pytest.fixture
def theme(tmp_path):
    with override_settings(BLOCKS_THEME_DIR=str(tmp_path)):
        yield tmp_path


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def run(*args, **options):
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


class TestHtmlToBlocks:
    def test_src_file_is_written_to_theme_dir(self, theme):
        write(theme / "src" / "parts" / "header.html", HEADER_HTML)

        output = run("html_to_blocks", "src/parts/header.html")

        assert (theme / "parts" / "header.html").read_text() == HEADER_MARKUP
        assert "✓ src/parts/header.html → parts/header.html" in output

    def test_directory_with_all(self, theme):
        write(theme / "src" / "parts" / "header.html", HEADER_HTML)
        write(theme / "src" / "parts" / "footer.html", "<footer></footer>")
        write(theme / "src" / "parts" / "notes.txt", "skip")

        output = run("html_to_blocks", "src/parts", all=True)

        assert sorted(p.name for p in (theme / "parts").iterdir()) == ["footer.html", "header.html"]
        assert "Converted 2 file(s)" in output

    def test_page_context_uses_single_escaping(self, theme):
        write(theme / "src" / "pages" / "home.html", '<div data-path="a\\b"></div>')

        run("html_to_blocks", "src/pages/home.html", context="page")

        assert (theme / "pages" / "home.html").read_text() == (
            '<!-- wp:universal/element {"tagName":"div","data-path":"a\\\\b"} /-->\n'
        )

    def test_directory_requires_all(self, theme):
        (theme / "src").mkdir()
        with pytest.raises(CommandError, match="--all"):
            run("html_to_blocks", "src")

    def test_missing_path(self, theme):
        with pytest.raises(CommandError, match="Path not found"):
            run("html_to_blocks", "src/missing.html")

    def test_wrong_suffix(self, theme):
        write(theme / "notes.txt", "x")
        with pytest.raises(CommandError, match="must be a .html file"):
            run("html_to_blocks", "notes.txt")

    def test_source_is_never_overwritten(self, theme):
        source = write(theme / "header.html", HEADER_HTML)

        output = run("html_to_blocks", "header.html", output=".")

        assert source.read_text() == HEADER_HTML
        assert "✗ header.html" in output
        assert "1 file(s) failed" in output


class TestBlocksToHtml:
    def test_block_markup_is_written_back_to_src(self, theme):
        write(theme / "parts" / "header.html", HEADER_MARKUP)

        output = run("blocks_to_html", "parts/header.html")

        assert (theme / "src" / "parts" / "header.html").read_text() == HEADER_HTML
        assert "✓ parts/header.html → src/parts/header.html" in output

    def test_round_trip(self, theme):
        write(theme / "src" / "parts" / "header.html", HEADER_HTML)

        run("html_to_blocks", "src/parts/header.html")
        (theme / "src" / "parts" / "header.html").unlink()
        run("blocks_to_html", "parts/header.html")

        assert (theme / "src" / "parts" / "header.html").read_text() == HEADER_HTML

    def test_file_outside_theme_goes_to_src(self, theme, tmp_path_factory):
        source = write(tmp_path_factory.mktemp("outside") / "header.html", HEADER_MARKUP)

        run("blocks_to_html", str(source))

        assert source.read_text() == HEADER_MARKUP
        assert (theme / "src" / "header.html").read_text() == HEADER_HTML

    def test_src_file_is_not_mirrored_into_itself(self, theme):
        source = write(theme / "src" / "parts" / "header.html", HEADER_MARKUP)

        output = run("blocks_to_html", "src/parts/header.html")

        assert source.read_text() == HEADER_MARKUP
        assert not (theme / "src" / "src").exists()
        assert "overwrite the source file" in output
        assert "1 file(s) failed" in output

    def test_source_is_never_overwritten(self, theme):
        source = write(theme / "parts" / "header.html", HEADER_MARKUP)

        output = run("blocks_to_html", "parts/header.html", output="parts")

        assert source.read_text() == HEADER_MARKUP
        assert "✗ parts/header.html" in output

    def test_unbalanced_markup_is_reported(self, theme):
        write(theme / "parts" / "broken.html", '<!-- wp:universal/element {"tagName":"div"} -->')

        output = run("blocks_to_html", "parts/broken.html")

        assert "never closed" in output
        assert not (theme / "src").exists()


class TestHtmlToPattern:
    def test_directory_of_patterns(self, theme):
        write(theme / "src" / "patterns" / "hero-section.html", "<section></section>")
        write(theme / "src" / "patterns" / "cards" / "card-grid.html", "<div></div>")

        output = run(
            "html_to_pattern",
            "src/patterns",
            "--namespace",
            "mytheme",
            "--categories",
            "featured, hero",
        )

        hero = (theme / "patterns" / "hero-section.php").read_text()
        assert hero.startswith("<?php\n/**\n * Title: Hero Section\n * Slug: mytheme/hero-section\n")
        assert " * Categories: featured, hero\n" in hero
        assert hero.endswith('?>\n<!-- wp:universal/element {"tagName":"section"} /-->')
        assert (theme / "patterns" / "cards" / "card-grid.php").exists()
        assert "Converted 2 file(s)" in output

    def test_no_files(self, theme):
        (theme / "src").mkdir()
        assert "No HTML files found" in run("html_to_pattern", "src")


class TestMarkdownToBlocks:
    @pytest.fixture(autouse=True)
    def pandoc(self, monkeypatch):
        monkeypatch.setattr(
            renderer.pypandoc,
            "convert_text",
            lambda text, **kwargs: "<pre><code>a\\nb</code></pre>",
        )

    def test_markdown_file_written_next_to_source(self, theme):
        write(theme / "content" / "post.md", "---\ntitle: Post\n---\ncode")

        output = run("markdown_to_blocks", "content/post.md")

        markup = (theme / "content" / "post.html").read_text()
        assert markup == (
            '<!-- wp:universal/element {"tagName":"pre","innerHTML":"<code>a\\\\\\\\nb</code>"} /-->\n'
        )
        assert "Converted 1 markdown file(s)" in output

    def test_single_escape_to_output_dir(self, theme):
        write(theme / "content" / "post.md", "code")

        run("markdown_to_blocks", "content", all=True, single_escape=True, output="build")

        assert (theme / "build" / "post.html").read_text() == (
            '<!-- wp:universal/element {"tagName":"pre","innerHTML":"<code>a\\\\nb</code>"} /-->\n'
        )


@pytest.mark.parametrize(
    "relative, to_source, expected",
    [
        ("src/parts/header.html", False, "parts"),
        ("src/header.html", False, "."),
        ("parts/header.html", True, "src/parts"),
        ("src/parts/header.html", True, "src/parts"),
        ("header.html", True, "src"),
    ],
)
def test_default_output_dir(tmp_path, relative, to_source, expected):
    assert default_output_dir(tmp_path / relative, tmp_path, to_source) == tmp_path / expected


def test_default_output_dir_outside_theme(tmp_path):
    source = tmp_path / "elsewhere" / "header.html"
    theme = tmp_path / "theme"
    assert default_output_dir(source, theme, to_source=False) == source.parent
    assert default_output_dir(source, theme, to_source=True) == theme / "src"
