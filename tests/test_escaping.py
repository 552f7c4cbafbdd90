"""Tests for backslash-parity escaping of delimiters."""

import pytest

from latexspans import SegmentConfig, Span, SpanKind, segment
from latexspans.rules import count_preceding_backslashes, is_escaped
from latexspans.serialization import to_tuples


class TestBackslashCounting:
    """count_preceding_backslashes / is_escaped."""

    def test_no_backslash(self) -> None:
        assert count_preceding_backslashes("a$", 1) == 0
        assert not is_escaped("a$", 1)

    def test_start_of_string(self) -> None:
        assert count_preceding_backslashes("$", 0) == 0
        assert not is_escaped("$", 0)

    @pytest.mark.parametrize(
        ("count", "escaped"),
        [(1, True), (2, False), (3, True), (4, False)],
    )
    def test_parity(self, count: int, escaped: bool) -> None:
        source = "x" + "\\" * count + "$"
        assert count_preceding_backslashes(source, count + 1) == count
        assert is_escaped(source, count + 1) is escaped

    def test_run_stops_at_other_character(self) -> None:
        assert count_preceding_backslashes("\\a\\\\$", 4) == 2


class TestEscapedEquationMarkers:
    """Odd runs neutralize a marker, even runs do not."""

    def test_double_backslash_keeps_dollar_active(self) -> None:
        spans = segment("\\\\$x$")
        assert to_tuples(spans) == [
            ("\\\\", SpanKind.TEXT),
            ("x", SpanKind.INLINE_EQUATION),
        ]

    def test_triple_backslash_escapes_dollar(self) -> None:
        source = "\\\\\\$x$"
        assert segment(source) == [Span(source, SpanKind.TEXT)]

    def test_backslash_marker_with_even_prefix(self) -> None:
        spans = segment("a\\\\\\[x\\]")
        assert to_tuples(spans) == [
            ("a\\\\", SpanKind.TEXT),
            ("x", SpanKind.BLOCK_EQUATION),
        ]

    def test_escaped_close_skipped_for_later_close(self) -> None:
        spans = segment("$a\\$b$")
        assert to_tuples(spans) == [("a\\$b", SpanKind.INLINE_EQUATION)]

    def test_escaped_double_dollar_is_text_as_a_whole(self) -> None:
        # The second "$" of an escaped "$$" must not open an inline equation
        source = "\\$$x$"
        assert segment(source) == [Span(source, SpanKind.TEXT)]

    def test_escaped_double_dollar_is_one_unit_in_close_search(self) -> None:
        # The "$" after an escaped one is part of the escaped "$$"
        source = "$a\\$$"
        assert segment(source) == [Span(source, SpanKind.TEXT)]

    def test_escaped_double_dollar_inside_inline_equation(self) -> None:
        spans = segment("$a\\$$b$")
        assert to_tuples(spans) == [("a\\$$b", SpanKind.INLINE_EQUATION)]


class TestEscapedStyleMarkers:
    """Style markers use the same parity rule unless disabled."""

    def test_escaped_open_is_text(self) -> None:
        source = "\\#bold{x}"
        assert segment(source) == [Span(source, SpanKind.TEXT)]

    def test_escaped_close_brace_is_content(self) -> None:
        spans = segment("#bold{a \\} b}")
        assert to_tuples(spans) == [("a \\} b", SpanKind.BOLD_TEXT)]

    def test_escaping_disabled_for_styles(self) -> None:
        config = SegmentConfig(escape_style_markers=False)
        spans = segment("\\#bold{a \\} b}", config=config)
        assert to_tuples(spans) == [
            ("\\", SpanKind.TEXT),
            ("a \\", SpanKind.BOLD_TEXT),
            (" b}", SpanKind.TEXT),
        ]

    def test_escaping_disabled_for_styles_keeps_equation_escapes(self) -> None:
        config = SegmentConfig(escape_style_markers=False)
        source = "\\$x$"
        assert segment(source, config=config) == [Span(source, SpanKind.TEXT)]
