"""Message formatter: raw chat text to display markup.

The formatter is pure. It never raises and never escapes source text
unless asked to, so markup typed by the user or returned by the model
passes straight through to the display surface.
"""

import html
import re
from collections.abc import Sequence

from .rules import FORMAT_RULES, FormatRule

# Private-use code points bracket the index of a shielded fragment
_SHIELD_OPEN = "\ue000"
_SHIELD_CLOSE = "\ue001"
_SHIELD_PATTERN = re.compile(f"{_SHIELD_OPEN}([0-9]+){_SHIELD_CLOSE}")
_SHIELD_CHARS = re.compile(f"[{_SHIELD_OPEN}{_SHIELD_CLOSE}]")


class MessageFormatter:
    """Applies an ordered rule chain to message text.

    Example:
        >>> MessageFormatter().format("**hi** \\\\pi")
        '<strong>hi</strong> <span class="math-symbol">π</span>'
    """

    def __init__(
        self,
        rules: Sequence[FormatRule] = FORMAT_RULES,
        escape_html: bool = False,
    ):
        """Initialize the formatter.

        Args:
            rules: Rules applied in order
            escape_html: Escape ``&``, ``<`` and ``>`` in the source before
                the chain runs. Off by default, which keeps raw markup in
                messages intact.
        """
        self._rules = tuple(rules)
        self._escape_html = escape_html

    @property
    def rules(self) -> tuple[FormatRule, ...]:
        return self._rules

    def format(self, content: str | None) -> str:
        """Format message content as markup.

        Args:
            content: Raw message text (None is treated as empty)

        Returns:
            Markup fragment; empty input returns an empty string
        """
        if not content:
            return ""

        text = html.escape(content, quote=False) if self._escape_html else content
        shielded: list[str] = []

        def _stash(fragment: str) -> str:
            shielded.append(fragment)
            return f"{_SHIELD_OPEN}{len(shielded) - 1}{_SHIELD_CLOSE}"

        def _restore(match: re.Match[str]) -> str:
            return shielded[int(match.group(1))]

        # Marker characters already in the source are stashed as themselves,
        # so every marker left in the text below is one this call created
        text = _SHIELD_CHARS.sub(lambda m: _stash(m.group(0)), text)

        def _shield(match: re.Match[str], rule: FormatRule) -> str:
            fragment = match.expand(rule.replacement)
            return _stash(_SHIELD_PATTERN.sub(_restore, fragment))

        for rule in self._rules:
            if rule.shield:
                text = rule.pattern.sub(
                    lambda m, r=rule: _shield(m, r),
                    text,
                    count=rule.count,
                )
            else:
                text = rule.apply(text)

        if not shielded:
            return text
        return _SHIELD_PATTERN.sub(_restore, text)


_default_formatter = MessageFormatter()


def format_message(content: str | None) -> str:
    """Format message content with the default rule chain."""
    return _default_formatter.format(content)
