"""Single-pass segmenter for text, style and equation markup.

Walks the source once with a cursor and a pending-text accumulator. At
every position the delimiter rules are tried in priority order; the first
rule whose active open marker finds an active close marker emits a span.
Anything that does not pair stays plain text.

No regex in the scanning loop. Escapes are resolved by counting the
backslashes in front of each candidate marker.

Thread Safety:
Segmenter instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from latexspans.config import SegmentConfig, get_segment_config
from latexspans.location import SourceLocation
from latexspans.rules import DelimiterRule, is_escaped
from latexspans.spans import Span, SpanKind
from latexspans.utils.logger import get_logger

logger = get_logger(__name__)


class Segmenter:
    """Split a markup string into an ordered list of spans.

    Two states: scanning plain text, and searching for the close marker of
    a committed open marker. A failed search abandons the candidate and
    the marker stays in the pending text, so an unmatched or escaped
    delimiter degrades to plain text and never raises.

    Usage:
            >>> Segmenter("Hello, $\\\\TeX$!").segment()
            [Span(TEXT, 'Hello, ', 1:1), Span(INLINE_EQUATION, '\\\\TeX', 1:8), Span(TEXT, '!', 1:14)]

    Calling segment() again starts over and returns an equal, fresh list.

    Thread Safety:
        Segmenter instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_rules",
        "_escape_units",
        "_spans",
        "_pending_start",
        # Incremental line tracking for span locations
        "_line_pos",
        "_lineno",
        "_line_start",
    )

    def __init__(self, source: str, config: SegmentConfig | None = None) -> None:
        """Initialize segmenter with source text.

        Args:
            source: Markup source text
            config: Segment configuration (defaults to the context config)
        """
        if config is None:
            config = get_segment_config()
        self._source = source
        self._source_len = len(source)
        self._source_file = config.source_file
        self._rules = config.rules()
        # Longest first, so an escaped "\$$" is skipped as one unit
        self._escape_units = sorted(
            {
                marker
                for rule in self._rules
                if rule.escapable
                for marker in (rule.open, rule.close)
            },
            key=len,
            reverse=True,
        )
        self._spans: list[Span] = []
        self._reset()

    def segment(self) -> list[Span]:
        """Segment the whole source.

        Returns:
            Spans in source order. Empty only when the source is empty.
        """
        self._reset()
        pos = 0
        while pos < self._source_len:
            pos = self._scan_at(pos)
        self._flush_pending(self._source_len)
        logger.debug(
            "Segmented %d characters into %d spans", self._source_len, len(self._spans)
        )
        return self._spans

    def _reset(self) -> None:
        """Clear output and cursor state so segment() can be called again."""
        self._spans = []
        self._pending_start = 0
        self._line_pos = 0
        self._lineno = 1
        self._line_start = 0

    def _scan_at(self, pos: int) -> int:
        """Try every rule at ``pos`` in priority order.

        On a pair, emits pending text and the span. An escaped marker stays
        in the pending text as a whole; otherwise a single character does,
        so a later character of an abandoned marker may still open a pair.

        Returns:
            Offset to continue scanning from.
        """
        source = self._source
        for rule in self._rules:
            if not source.startswith(rule.open, pos):
                continue
            if rule.escapable and is_escaped(source, pos):
                # Neutralized marker is plain text as a whole
                return pos + len(rule.open)
            content_start = pos + len(rule.open)
            close_pos = self._find_close(rule, content_start)
            if close_pos is None:
                logger.debug(
                    "Unmatched %r at offset %d, treating as text", rule.open, pos
                )
                continue
            if close_pos == content_start:
                # Empty pair, e.g. "$$" read as an empty inline equation
                continue

            end = close_pos + len(rule.close)
            self._flush_pending(pos)
            self._emit(source[content_start:close_pos], rule.kind, pos, end)
            self._pending_start = end
            return end
        return pos + 1

    def _find_close(self, rule: DelimiterRule, start: int) -> int | None:
        """Find the nearest active close marker at or after ``start``.

        An escaped occurrence is skipped together with the longest escapable
        marker starting there, so the second "$" of an escaped "$$" never
        closes an inline equation.
        """
        source = self._source
        close = rule.close
        pos = source.find(close, start)
        while pos != -1:
            if not (rule.escapable and is_escaped(source, pos)):
                return pos
            pos = source.find(close, pos + self._escaped_length(pos))
        return None

    def _escaped_length(self, pos: int) -> int:
        for marker in self._escape_units:
            if self._source.startswith(marker, pos):
                return len(marker)
        return 1

    def _flush_pending(self, end: int) -> None:
        """Emit pending text up to ``end`` as a TEXT span."""
        start = self._pending_start
        if start < end:
            self._emit(self._source[start:end], SpanKind.TEXT, start, end)
        self._pending_start = end

    def _emit(self, text: str, kind: SpanKind, start: int, end: int) -> None:
        self._spans.append(Span(text, kind, self._location(start, end)))

    def _location(self, start: int, end: int) -> SourceLocation:
        """Build the location of a region starting at ``start``.

        Spans are emitted in source order, so line tracking only moves
        forward and the total work stays linear.
        """
        source = self._source
        newlines = source.count("\n", self._line_pos, start)
        if newlines:
            self._lineno += newlines
            self._line_start = source.rfind("\n", self._line_pos, start) + 1
        self._line_pos = start
        return SourceLocation(
            lineno=self._lineno,
            col_offset=start - self._line_start + 1,
            offset=start,
            end_offset=end,
            source_file=self._source_file,
        )


def segment(source: str, *, config: SegmentConfig | None = None) -> list[Span]:
    """Split markup source into typed spans.

    Args:
        source: Markup source text
        config: Segment configuration (defaults to the context config)

    Returns:
        Spans in source order. Never raises; unmatched or escaped delimiters
        are kept as plain text.

    Example:
        >>> segment("Before #bold{Hello, World!} After")
        [Span(TEXT, 'Before ', 1:1), Span(BOLD_TEXT, 'Hello, World!', 1:8), Span(TEXT, ' After', 1:28)]
    """
    return Segmenter(source, config).segment()
