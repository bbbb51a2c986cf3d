"""Terminal rendering for chat messages.

Rich cannot render the HTML produced by the message formatter, so the
terminal surfaces (CLI and TUI) render the raw content as Markdown with
LaTeX notation flattened to plain Unicode.
"""

import re

from rich.markdown import Markdown

from .rules import MATH_SYMBOLS, SQRT_GLYPH


def clean_latex(text: str) -> str:
    """Convert LaTeX notation to plain text equivalents.

    Handles the same macros the markup formatter knows about:
    - $$...$$ and $...$ delimiters -> just the content
    - \\frac{a}{b} -> (a)/(b)
    - \\sqrt{x} -> √(x)
    - \\pi, \\sum, ... -> the Unicode glyph
    """
    # Remove $$ ... $$ display math delimiters (do this before single $)
    text = re.sub(r"\$\$\s*", "", text)

    # Remove $ ... $ inline math delimiters (but not escaped \$)
    text = re.sub(r"(?<!\\)\$([^$]+)(?<!\\)\$", r"\1", text)

    text = re.sub(r"\\frac\{([^}]*)\}\{([^}]*)\}", r"(\1)/(\2)", text)
    text = re.sub(r"\\sqrt\{([^}]*)\}", SQRT_GLYPH + r"(\1)", text)
    for macro, glyph in MATH_SYMBOLS.items():
        text = text.replace("\\" + macro, glyph)

    return text


def render_terminal(content: str) -> Markdown:
    """Render message content as Markdown with LaTeX cleaned up."""
    return Markdown(clean_latex(content))
