"""Unit tests for post/message formatting helpers."""

from datetime import datetime

from inkfolio.content import (
    format_message_time,
    format_post_date,
    render_markdown,
    to_html,
)


def test_render_markdown_basic_blocks():
    html = render_markdown("# Title\n\nSome **bold** and *italic* text.\n\n- one\n- two")

    assert "<h1>Title</h1>" in html
    assert "<strong>bold</strong>" in html
    assert "<em>italic</em>" in html
    assert "<ul>" in html and "<li>one</li>" in html


def test_render_markdown_blockquote_and_code():
    html = render_markdown("> quoted\n\n```\ncode()\n```")

    assert "<blockquote>" in html
    assert "<code>" in html


def test_render_markdown_is_stateless_between_calls():
    """Footnotes from one document do not leak into the next."""
    first = render_markdown("Text[^1]\n\n[^1]: note")
    second = render_markdown("Plain")

    assert "footnote" in first
    assert "footnote" not in second


def test_render_markdown_empty():
    assert render_markdown("") == ""
    assert render_markdown("   \n") == ""


def test_to_html_passes_html_through():
    assert to_html("<p>hi</p>", "html") == "<p>hi</p>"
    assert to_html("**hi**", "markdown") == "<p><strong>hi</strong></p>"


def test_format_post_date():
    assert format_post_date(datetime(2026, 1, 8)) == "Jan 08, 2026"


def test_format_message_time():
    assert format_message_time(datetime(2026, 1, 18, 0, 5)) == "12:05 AM"
    assert format_message_time(datetime(2026, 1, 18, 9, 30)) == "9:30 AM"
    assert format_message_time(datetime(2026, 1, 18, 12, 0)) == "12:00 PM"
    assert format_message_time(datetime(2026, 1, 18, 15, 7)) == "3:07 PM"
