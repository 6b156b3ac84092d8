from .renderer import markdown_to_block_markup, render_markdown

__all__ = ["markdown_to_block_markup", "render_markdown"]
