"""Standalone HTML transcripts of a conversation."""

import html
from collections.abc import Iterable

from ..conversation.models import Message
from .formatter import MessageFormatter

TRANSCRIPT_CSS = """
body { font-family: system-ui, sans-serif; max-width: 48rem; margin: 2rem auto; }
.message { padding: 0.75rem 1rem; margin: 0.5rem 0; border-radius: 0.5rem; }
.message.user { background: #f3ede4; }
.message.assistant { background: #efe7f7; }
.message-role { font-weight: bold; margin-bottom: 0.25rem; }
.math-inline, .math-symbol { font-family: "Cambria Math", serif; }
.math-display { display: block; text-align: center; margin: 0.5rem 0; }
.fraction { display: inline-flex; flex-direction: column; vertical-align: middle; text-align: center; }
.numerator { border-bottom: 1px solid currentColor; }
.radicand { border-top: 1px solid currentColor; }
"""


def render_transcript_html(
    title: str,
    messages: Iterable[Message],
    formatter: MessageFormatter | None = None,
) -> str:
    """Render a conversation as a complete HTML document.

    Args:
        title: Document title (escaped)
        messages: Messages in display order
        formatter: Formatter for message bodies (default rule chain if None)

    Returns:
        HTML document as a string
    """
    fmt = formatter or MessageFormatter()
    parts = []
    for message in messages:
        role = message.role.value
        label = "You" if role == "user" else "Bean Stash"
        parts.append(
            f'<div class="message {role}">'
            f'<div class="message-role">{label}</div>'
            f'<div class="message-content">{fmt.format(message.content)}</div>'
            "</div>"
        )

    body = "\n".join(parts)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<style>{TRANSCRIPT_CSS}</style>\n"
        "</head>\n<body>\n"
        f"<h1>{html.escape(title)}</h1>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )
