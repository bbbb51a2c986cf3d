"""Ordered rewrite rules for chat message markup.

Hides the rule table: each rule is a compiled pattern plus a replacement,
and the formatter applies them strictly in list order. Later rules see
the output of earlier ones, so the order is part of the contract.
"""

import re
from dataclasses import dataclass

# Zero-argument LaTeX macros and the glyph each one renders as
MATH_SYMBOLS: dict[str, str] = {
    "sum": "\u2211",
    "int": "\u222b",
    "pi": "\u03c0",
    "theta": "\u03b8",
    "alpha": "\u03b1",
    "beta": "\u03b2",
    "gamma": "\u03b3",
    "delta": "\u03b4",
    "infty": "\u221e",
}

SQRT_GLYPH = "\u221a"

# Line and whitespace classes for the list rules. Only \n, \r, U+2028 and
# U+2029 end a line, and whitespace excludes the \x1c-\x1f separators
_LINE_TERMINATORS = "\n\r\u2028\u2029"
_LINE_START = f"(?<![^{_LINE_TERMINATORS}])"
_LINE_END = f"(?=[{_LINE_TERMINATORS}]|\\Z)"
_LINE_TEXT = f"[^{_LINE_TERMINATORS}]"
_SPACE = "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"


@dataclass(frozen=True)
class FormatRule:
    """A single pattern -> replacement rewrite.

    Attributes:
        name: Short identifier used in tests and debugging
        pattern: Compiled regular expression
        replacement: ``re.sub`` replacement template
        count: Maximum substitutions (0 means all)
        shield: Matches are set aside so later rules cannot touch them
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str
    count: int = 0
    shield: bool = False

    def apply(self, text: str) -> str:
        """Apply this rule to text."""
        return self.pattern.sub(self.replacement, text, count=self.count)


def _symbol_rule(macro: str, glyph: str) -> FormatRule:
    return FormatRule(
        name=f"symbol-{macro}",
        pattern=re.compile(r"\\" + macro),
        replacement=f'<span class="math-symbol">{glyph}</span>',
    )


FORMAT_RULES: tuple[FormatRule, ...] = (
    FormatRule("line-break", re.compile(r"\n"), "<br>"),
    # Inline math runs first, so $$x$$ is partly consumed here
    FormatRule(
        "math-inline",
        re.compile(r"\$([^$]+)\$"),
        r'<span class="math-inline">\1</span>',
    ),
    FormatRule(
        "math-display",
        re.compile(r"\$\$([^$]+)\$\$"),
        r'<div class="math-display">\1</div>',
    ),
    FormatRule("code", re.compile(r"`([^`]+)`"), r"<code>\1</code>", shield=True),
    FormatRule("bold", re.compile(r"\*\*([^*]+)\*\*"), r"<strong>\1</strong>"),
    FormatRule("italic", re.compile(r"\*([^*]+)\*"), r"<em>\1</em>"),
    FormatRule(
        "bullet-item",
        re.compile(f"{_LINE_START}-{_SPACE}+({_LINE_TEXT}+){_LINE_END}"),
        r"<li>\1</li>",
    ),
    FormatRule(
        "bullet-list",
        re.compile(r"(<li>.*</li>)", re.DOTALL),
        r"<ul>\1</ul>",
        count=1,
    ),
    # Numbered items get no <ol> container
    FormatRule(
        "numbered-item",
        re.compile(f"{_LINE_START}[0-9]+\\.{_SPACE}+({_LINE_TEXT}+){_LINE_END}"),
        r"<li>\1</li>",
    ),
    FormatRule("collapse-breaks", re.compile(r"<br><br><br>"), "<br><br>"),
    FormatRule(
        "fraction",
        re.compile(r"\\frac\{([^}]+)\}\{([^}]+)\}"),
        r'<span class="fraction"><span class="numerator">\1</span>'
        r'<span class="denominator">\2</span></span>',
    ),
    FormatRule(
        "sqrt",
        re.compile(r"\\sqrt\{([^}]+)\}"),
        f'<span class="sqrt">{SQRT_GLYPH}<span class="radicand">' + r"\1</span></span>",
    ),
    *(_symbol_rule(macro, glyph) for macro, glyph in MATH_SYMBOLS.items()),
)
