"""
Render Portable Text (the CMS rich-content format) to HTML.
"""

import re
from html import escape
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlsplit

from shared.logging import get_logger

logger = get_logger("site.portable_text")

BLOCK_STYLES = {
    "normal": "p",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "h4": "h4",
    "h5": "h5",
    "h6": "h6",
    "blockquote": "blockquote",
}

LIST_TAGS = {"bullet": "ul", "number": "ol"}

DECORATORS = {
    "strong": ("<strong>", "</strong>"),
    "em": ("<em>", "</em>"),
    "code": ("<code>", "</code>"),
    "underline": ('<span style="text-decoration:underline">', "</span>"),
    "strike-through": ("<del>", "</del>"),
}

SAFE_LINK_SCHEMES = frozenset({"", "http", "https", "mailto", "tel"})

# Browsers drop these before reading a URL scheme
_URL_IGNORED = re.compile(r"[\t\n\r]")
_URL_LEADING = re.compile(r"^[\x00-\x20]+")


def is_safe_href(href: str) -> bool:
    """True for relative links and http(s), mailto and tel URLs."""
    cleaned = _URL_LEADING.sub("", _URL_IGNORED.sub("", href))
    try:
        scheme = urlsplit(cleaned).scheme
    except ValueError:
        return False
    return scheme.lower() in SAFE_LINK_SCHEMES


def _render_span(span: Dict[str, Any], mark_defs: Dict[str, Dict[str, Any]]) -> str:
    text = escape(span.get("text", "")).replace("\n", "<br/>")

    # First mark ends up outermost
    for mark in reversed(span.get("marks") or []):
        if mark in DECORATORS:
            open_tag, close_tag = DECORATORS[mark]
            text = f"{open_tag}{text}{close_tag}"
            continue

        annotation = mark_defs.get(mark)
        if annotation and annotation.get("_type") == "link" and annotation.get("href"):
            if not is_safe_href(annotation["href"]):
                logger.debug("Unsafe link rendered as text", href=annotation["href"])
                continue
            href = escape(annotation["href"], quote=True)
            text = f'<a href="{href}">{text}</a>'
        else:
            logger.debug("Unknown mark skipped", mark=mark)
    return text


def _render_children(block: Dict[str, Any]) -> str:
    mark_defs = {
        definition["_key"]: definition
        for definition in block.get("markDefs") or []
        if "_key" in definition
    }
    return "".join(
        _render_span(child, mark_defs)
        for child in block.get("children") or []
        if child.get("_type", "span") == "span"
    )


def _render_image(block: Dict[str, Any]) -> Optional[str]:
    url = (block.get("asset") or {}).get("url")
    if not url:
        logger.debug("Image block without asset url skipped", key=block.get("_key"))
        return None
    alt = escape(block.get("alt") or "", quote=True)
    return f'<figure><img src="{escape(url, quote=True)}" alt="{alt}"/></figure>'


class _ListStack:
    """Open list elements, innermost last. Each item: [tag, level, li_open]."""

    def __init__(self, out: List[str]):
        self.out = out
        self.stack: List[List[Any]] = []

    def _pop(self) -> None:
        tag, _, li_open = self.stack.pop()
        if li_open:
            self.out.append("</li>")
        self.out.append(f"</{tag}>")

    def close_all(self) -> None:
        while self.stack:
            self._pop()

    def add_item(self, tag: str, level: int, content: str) -> None:
        while self.stack and self.stack[-1][1] > level:
            self._pop()
        if self.stack and self.stack[-1][1] == level and self.stack[-1][0] != tag:
            self._pop()

        if self.stack and self.stack[-1][1] == level:
            if self.stack[-1][2]:
                self.out.append("</li>")
        else:
            self.out.append(f"<{tag}>")
            self.stack.append([tag, level, False])

        self.out.append(f"<li>{content}")
        self.stack[-1][2] = True


def render_portable_text(blocks: Optional[Sequence[Dict[str, Any]]]) -> str:
    """Render a list of Portable Text blocks to an HTML fragment."""
    out: List[str] = []
    lists = _ListStack(out)

    for block in blocks or []:
        block_type = block.get("_type")

        if block_type == "block" and block.get("listItem"):
            tag = LIST_TAGS.get(block["listItem"], "ul")
            lists.add_item(tag, int(block.get("level") or 1), _render_children(block))
            continue

        lists.close_all()

        if block_type == "block":
            tag = BLOCK_STYLES.get(block.get("style") or "normal", "p")
            out.append(f"<{tag}>{_render_children(block)}</{tag}>")
        elif block_type == "image":
            rendered = _render_image(block)
            if rendered:
                out.append(rendered)
        else:
            logger.debug("Unknown block type skipped", block_type=block_type)

    lists.close_all()
    return "".join(out)
