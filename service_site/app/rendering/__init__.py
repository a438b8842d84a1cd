"""
Rendering package: Portable Text to HTML and news page templates.
"""

from .pages import generate_metadata, render_news_index, render_news_post, render_not_found
from .portable_text import render_portable_text

__all__ = [
    "generate_metadata",
    "render_news_index",
    "render_news_post",
    "render_not_found",
    "render_portable_text",
]
