"""
Unit tests for the Portable Text renderer.
"""

import pytest

from service_site.app.rendering.portable_text import render_portable_text


def block(text, style="normal", marks=None, mark_defs=None, **extra):
    data = {
        "_type": "block",
        "style": style,
        "markDefs": mark_defs or [],
        "children": [{"_type": "span", "text": text, "marks": marks or []}],
    }
    data.update(extra)
    return data


def test_empty_body():
    assert render_portable_text(None) == ""
    assert render_portable_text([]) == ""


def test_paragraphs_and_headings():
    html = render_portable_text([block("Intro", style="h2"), block("Hello"), block("Quote", style="blockquote")])

    assert html == "<h2>Intro</h2><p>Hello</p><blockquote>Quote</blockquote>"


def test_text_is_escaped():
    html = render_portable_text([block("<script>alert('x')</script> & more")])

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&amp; more" in html


def test_decorators_nest_first_mark_outermost():
    html = render_portable_text([block("bold italic", marks=["strong", "em"])])

    assert html == "<p><strong><em>bold italic</em></strong></p>"


def test_link_annotation():
    html = render_portable_text([
        block(
            "tickets",
            marks=["lnk1"],
            mark_defs=[{"_key": "lnk1", "_type": "link", "href": "https://tickets.example.com/?a=1&b=2"}],
        )
    ])

    assert html == '<p><a href="https://tickets.example.com/?a=1&amp;b=2">tickets</a></p>'


@pytest.mark.parametrize("href", [
    "javascript:alert(document.cookie)",
    " JavaScript:alert(1)",
    "java\tscript:alert(1)",
    "data:text/html;base64,PHNjcmlwdD4=",
    "vbscript:msgbox(1)",
])
def test_unsafe_link_renders_plain_text(href):
    html = render_portable_text([
        block("click", marks=["lnk1"], mark_defs=[{"_key": "lnk1", "_type": "link", "href": href}])
    ])

    assert html == "<p>click</p>"


@pytest.mark.parametrize("href", ["/news/summer-tour", "#tickets", "mailto:press@example.com", "tel:+233200000000"])
def test_safe_link_kept(href):
    html = render_portable_text([
        block("go", marks=["lnk1"], mark_defs=[{"_key": "lnk1", "_type": "link", "href": href}])
    ])

    assert html == f'<p><a href="{href}">go</a></p>'


def test_unknown_mark_renders_plain_text():
    assert render_portable_text([block("plain", marks=["highlight"])]) == "<p>plain</p>"


def test_line_breaks_preserved():
    assert render_portable_text([block("one\ntwo")]) == "<p>one<br/>two</p>"


def test_bullet_and_numbered_lists():
    html = render_portable_text([
        block("a", listItem="bullet", level=1),
        block("b", listItem="bullet", level=1),
        block("first", listItem="number", level=1),
        block("after"),
    ])

    assert html == "<ul><li>a</li><li>b</li></ul><ol><li>first</li></ol><p>after</p>"


def test_nested_list():
    html = render_portable_text([
        block("a", listItem="bullet", level=1),
        block("a.1", listItem="number", level=2),
        block("b", listItem="bullet", level=1),
    ])

    assert html == "<ul><li>a<ol><li>a.1</li></ol></li><li>b</li></ul>"


def test_image_block():
    html = render_portable_text([
        {"_type": "image", "alt": "Crowd", "asset": {"url": "https://cdn.example.com/crowd.jpg"}},
        {"_type": "image", "asset": {}},
    ])

    assert html == '<figure><img src="https://cdn.example.com/crowd.jpg" alt="Crowd"/></figure>'


def test_image_block_needs_dereferenced_asset():
    unresolved = {"_type": "image", "_key": "i1", "asset": {"_ref": "image-abc123-800x600-jpg", "_type": "reference"}}
    resolved = dict(unresolved, asset={"url": "https://cdn.example.com/abc123-800x600.jpg"})

    assert render_portable_text([unresolved]) == ""
    assert render_portable_text([resolved]) == (
        '<figure><img src="https://cdn.example.com/abc123-800x600.jpg" alt=""/></figure>'
    )


def test_unknown_block_type_skipped():
    html = render_portable_text([{"_type": "youtube", "url": "x"}, block("kept")])

    assert html == "<p>kept</p>"
