"""Markup renderer — puts every span back between its delimiters.

For any source, ``render_markup(segment(source)) == source``: TEXT spans
keep escaped and unmatched markers verbatim, and every other span gets the
open and close markers of its kind around its captured text.

Example:
    >>> from latexspans import segment
    >>> render_markup(segment("Before #bold{Hello} $x$"))
    'Before #bold{Hello} $x$'
"""

from collections.abc import Sequence

from latexspans.rules import delimiters_for
from latexspans.spans import Span
from latexspans.stringbuilder import StringBuilder


class MarkupRenderer:
    """Render spans back to the markup they were segmented from."""

    __slots__ = ()

    def render(self, spans: Sequence[Span]) -> str:
        """Render spans to markup."""
        sb = StringBuilder()
        for span in spans:
            open_marker, close_marker = delimiters_for(span.kind)
            sb.append(open_marker).append(span.text).append(close_marker)
        return sb.build()


def render_markup(spans: Sequence[Span]) -> str:
    """Render spans back to markup.

    Args:
        spans: Spans in source order.

    Returns:
        Markup string.
    """
    return MarkupRenderer().render(spans)
