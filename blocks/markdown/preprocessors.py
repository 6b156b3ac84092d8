# blocks/markdown/preprocessors.py

import re

FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)(.*)$", re.DOTALL)


def strip_frontmatter(text, context):
    """
    Remove a leading YAML frontmatter block.

    The raw frontmatter is kept in ``context["frontmatter"]`` for hosts that
    store it alongside the content; it is not interpreted here.
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return text
    context["frontmatter"] = match.group(1)
    return match.group(2).strip()


PREPROCESSORS = [
    strip_frontmatter,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
