"""Delimiter rule table for the segmenter.

Several markers share a prefix (``$`` and ``$$``, ``\\begin{equation}`` and
``\\begin{equation*}``), so the table is ordered: at every scan position the
rules are tried first to last and the first one that pairs wins. Longer,
more specific markers come before the markers they extend.

Thread Safety:
All rules are frozen and the tables are module-level tuples.

Usage:
    from latexspans.rules import DEFAULT_RULES

    for rule in DEFAULT_RULES:
        if source.startswith(rule.open, pos):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass

from latexspans.spans import SpanKind


@dataclass(frozen=True, slots=True)
class DelimiterRule:
    """An open/close marker pair and the span kind it produces.

    Attributes:
        open: Opening marker
        close: Closing marker
        kind: Kind of the span emitted when both markers pair
        escapable: Whether a preceding odd run of backslashes neutralizes
            the markers of this rule

    """

    open: str
    close: str
    kind: SpanKind
    escapable: bool = True

    @property
    def is_style(self) -> bool:
        return self.kind.is_style


STYLE_RULES: tuple[DelimiterRule, ...] = (
    DelimiterRule("#bold{", "}", SpanKind.BOLD_TEXT),
    DelimiterRule("#italic{", "}", SpanKind.ITALIC_TEXT),
    DelimiterRule("#underline{", "}", SpanKind.UNDERLINE_TEXT),
)

# $$ before $, equation* before equation
EQUATION_RULES: tuple[DelimiterRule, ...] = (
    DelimiterRule("$$", "$$", SpanKind.DISPLAY_EQUATION),
    DelimiterRule("$", "$", SpanKind.INLINE_EQUATION),
    DelimiterRule("\\[", "\\]", SpanKind.BLOCK_EQUATION),
    DelimiterRule(
        "\\begin{equation*}", "\\end{equation*}", SpanKind.NAMED_UNNUMBERED_EQUATION
    ),
    DelimiterRule("\\begin{equation}", "\\end{equation}", SpanKind.NAMED_EQUATION),
)

DEFAULT_RULES: tuple[DelimiterRule, ...] = STYLE_RULES + EQUATION_RULES

_RULES_BY_KIND: dict[SpanKind, DelimiterRule] = {rule.kind: rule for rule in DEFAULT_RULES}


def delimiters_for(kind: SpanKind) -> tuple[str, str]:
    """Return the ``(open, close)`` markers that surround a span of ``kind``.

    Plain text has no delimiters and yields ``("", "")``.

    Example:
        >>> delimiters_for(SpanKind.DISPLAY_EQUATION)
        ('$$', '$$')
    """
    rule = _RULES_BY_KIND.get(kind)
    if rule is None:
        return ("", "")
    return (rule.open, rule.close)


def count_preceding_backslashes(source: str, pos: int) -> int:
    """Count consecutive backslashes immediately before ``pos``."""
    count = 0
    i = pos - 1
    while i >= 0 and source[i] == "\\":
        count += 1
        i -= 1
    return count


def is_escaped(source: str, pos: int) -> bool:
    """Check whether the marker starting at ``pos`` is neutralized.

    Each pair of backslashes cancels out; an odd run leaves one unpaired
    backslash that escapes the marker. The count is taken over backslashes
    strictly before ``pos``, also for markers that begin with a backslash.

    Example:
        >>> is_escaped("\\\\$x", 1)
        True
        >>> is_escaped("\\\\\\\\$x", 2)
        False
    """
    return count_preceding_backslashes(source, pos) % 2 == 1
