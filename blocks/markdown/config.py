# blocks/markdown/config.py

from django.conf import settings

DEFAULT_PANDOC_EXTRA_ARGS = [
    # Pandoc markdown extensions (all in --from argument)
    "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes",
    # No wrapping, so the HTML -> block step sees one line per paragraph
    "--wrap=none",
]


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering of content files.

    raw_html is enabled so custom elements (<Pattern>, <Part>...) written in
    markdown pass through to the block converter untouched.
    """
    return {
        "to": "html5",
        "format": "markdown",
        "extra_args": list(
            getattr(settings, "BLOCKS_PANDOC_EXTRA_ARGS", DEFAULT_PANDOC_EXTRA_ARGS)
        ),
        "filters": [],
    }
