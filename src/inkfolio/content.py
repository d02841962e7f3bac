"""Post body formatting helpers."""

from datetime import datetime

import markdown


MD_EXTENSIONS = ["extra", "sane_lists", "nl2br"]


def _markdown_renderer() -> markdown.Markdown:
    return markdown.Markdown(extensions=MD_EXTENSIONS, output_format="html")


def render_markdown(text: str) -> str:
    """Convert pasted Markdown to the HTML the editor stores."""
    if not text.strip():
        return ""
    return _markdown_renderer().convert(text)


def to_html(content: str, content_format: str) -> str:
    if content_format == "markdown":
        return render_markdown(content)
    return content


def format_post_date(when: datetime) -> str:
    """`Jan 18, 2026`, the display date the admin editor stamps on posts."""
    return when.strftime("%b %d, %Y")


def format_message_time(when: datetime) -> str:
    """`3:07 PM`, the clock time shown on message board entries."""
    hour = when.hour % 12 or 12
    suffix = "AM" if when.hour < 12 else "PM"
    return f"{hour}:{when.minute:02d} {suffix}"
