"""Message formatting module.

Turns raw chat text into display markup:
- rules.py: the ordered rewrite rule table
- formatter.py: the pure formatter that applies it
- terminal.py: Rich rendering for terminal surfaces
- transcript.py: standalone HTML transcripts
"""

from .formatter import MessageFormatter, format_message
from .rules import FORMAT_RULES, MATH_SYMBOLS, FormatRule
from .terminal import clean_latex, render_terminal
from .transcript import render_transcript_html

__all__ = [
    "FORMAT_RULES",
    "FormatRule",
    "MATH_SYMBOLS",
    "MessageFormatter",
    "clean_latex",
    "format_message",
    "render_terminal",
    "render_transcript_html",
]
