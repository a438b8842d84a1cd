"""
HTML page renderers for the news section.

Renderers are pure: they take already-fetched records and return markup.
Fetching and the not-found decision happen in the service routes.
"""

from datetime import datetime
from html import escape
from typing import Dict, Optional, Sequence

from .portable_text import render_portable_text
from ..content.models import NewsPost

PLACEHOLDER_IMAGE = "/placeholder.webp"


def format_date(value: datetime) -> str:
    """Short numeric date, month first (e.g. 3/7/2025)."""
    return f"{value.month}/{value.day}/{value.year}"


def generate_metadata(post: Optional[NewsPost], site_name: str) -> Dict[str, str]:
    """Document title and description for a news post page."""
    if post is None:
        return {"title": "Post Not Found"}

    metadata = {"title": f"{post.title} | {site_name} Blog"}
    if post.excerpt:
        metadata["description"] = post.excerpt
    return metadata


def render_document(metadata: Dict[str, str], body: str) -> str:
    description = metadata.get("description")
    description_tag = (
        f'<meta name="description" content="{escape(description, quote=True)}"/>'
        if description else ""
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        f"<title>{escape(metadata['title'])}</title>{description_tag}</head>"
        f"<body>{body}</body></html>"
    )


def _render_time(post: NewsPost) -> str:
    if post.published_at is None:
        return ""
    published = post.published_at_text or post.published_at.isoformat()
    return (
        f'<time datetime="{escape(published, quote=True)}">'
        f"{format_date(post.published_at)}</time>"
    )


def _render_byline(post: NewsPost) -> str:
    parts = []
    published = _render_time(post)
    if published:
        parts.append(f'<div class="byline-item">{published}</div>')

    if post.author:
        parts.append(f'<div class="byline-item"><span>{escape(post.author.name)}</span></div>')

    if post.categories:
        titles = ", ".join(category.title for category in post.categories)
        parts.append(f'<div class="byline-item"><span>{escape(titles)}</span></div>')

    return f'<div class="byline">{"".join(parts)}</div>'


def _render_hero(post: NewsPost) -> str:
    if not post.main_image:
        return ""
    src = post.main_image.url or PLACEHOLDER_IMAGE
    return (
        f'<div class="hero"><img src="{escape(src, quote=True)}" '
        f'alt="{escape(post.title, quote=True)}"/></div>'
    )


def _render_author_bio(post: NewsPost, site_name: str) -> str:
    author = post.author
    if author is None:
        content = f"<p>{escape(site_name)} Team</p>"
    else:
        image = ""
        if author.image:
            src = author.image.url or PLACEHOLDER_IMAGE
            image = (
                f'<img src="{escape(src, quote=True)}" alt="{escape(author.name, quote=True)}" '
                'width="60" height="60"/>'
            )
        bio = f'<p class="muted">{escape(author.bio)}</p>' if author.bio else ""
        content = f'<div class="author">{image}<div><h3>{escape(author.name)}</h3>{bio}</div></div>'

    return f'<div class="author-bio"><h2>About the Author</h2>{content}</div>'


def render_news_post(post: NewsPost, site_name: str) -> str:
    """Full HTML document for a single news post."""
    article = (
        '<article class="news-post">'
        f"<h1>{escape(post.title)}</h1>"
        f"{_render_byline(post)}"
        f"{_render_hero(post)}"
        f'<div class="prose">{render_portable_text(post.body)}</div>'
        '<hr class="separator"/>'
        f"{_render_author_bio(post, site_name)}"
        "</article>"
    )
    return render_document(generate_metadata(post, site_name), article)


def render_news_index(posts: Sequence[NewsPost], site_name: str) -> str:
    """HTML document listing news posts, newest first as given."""
    items = []
    for post in posts:
        excerpt = f"<p>{escape(post.excerpt)}</p>" if post.excerpt else ""
        items.append(
            f'<li><a href="{escape(post.path, quote=True)}">{escape(post.title)}</a>'
            f"{_render_time(post)}"
            f"{excerpt}</li>"
        )

    listing = f'<ul class="news-list">{"".join(items)}</ul>' if items else "<p>No news yet.</p>"
    body = f'<section class="news-index"><h1>News</h1>{listing}</section>'
    return render_document({"title": f"News | {site_name} Blog"}, body)


def render_not_found() -> str:
    """Standard not-found page."""
    body = '<div class="not-found"><h1>404</h1><h2>This page could not be found.</h2></div>'
    return render_document({"title": "404: This page could not be found."}, body)
