"""Tests for latexspans.serialization — span JSON round-trip."""

import json

import pytest

from latexspans import SerializationError, Span, SpanKind, segment
from latexspans.location import SourceLocation
from latexspans.serialization import from_dict, from_json, to_dict, to_json, to_tuples

SOURCE = "Intro #bold{B}\n$$\nE = mc^2\n$$ and \\begin{equation*}x\\end{equation*}"


class TestToTuples:
    def test_pairs(self) -> None:
        assert to_tuples(segment("a $b$")) == [
            ("a ", SpanKind.TEXT),
            ("b", SpanKind.INLINE_EQUATION),
        ]

    def test_empty(self) -> None:
        assert to_tuples([]) == []


class TestToDict:
    def test_fields(self) -> None:
        data = to_dict(segment("$x$", config=None)[0])
        assert data == {
            "text": "x",
            "kind": "inline_equation",
            "location": {
                "lineno": 1,
                "col_offset": 1,
                "offset": 0,
                "end_offset": 3,
                "source_file": None,
            },
        }

    def test_without_location(self) -> None:
        assert to_dict(Span("x"))["location"] is None


class TestRoundTrip:
    def test_spans_and_locations(self) -> None:
        spans = segment(SOURCE)
        restored = from_json(to_json(spans))
        assert restored == spans
        assert [s.location for s in restored] == [s.location for s in spans]

    def test_deterministic(self) -> None:
        spans = segment(SOURCE)
        assert to_json(spans) == to_json(segment(SOURCE))

    def test_indent(self) -> None:
        out = to_json(segment("$x$"), indent=2)
        assert "\n  " in out
        assert json.loads(out)[0]["kind"] == "inline_equation"

    def test_location_optional(self) -> None:
        assert from_dict({"text": "x", "kind": "bold_text"}) == Span("x", SpanKind.BOLD_TEXT)

    def test_location_defaults(self) -> None:
        span = from_dict({"text": "x", "kind": "text", "location": {"lineno": 2, "col_offset": 3}})
        assert span.location == SourceLocation(lineno=2, col_offset=3)


class TestErrors:
    def test_unknown_kind(self) -> None:
        with pytest.raises(SerializationError, match="Unknown span kind"):
            from_dict({"text": "x", "kind": "strikethrough"})

    def test_missing_text(self) -> None:
        with pytest.raises(SerializationError, match="text"):
            from_dict({"kind": "text"})

    def test_malformed_location(self) -> None:
        with pytest.raises(SerializationError, match="Malformed location"):
            from_dict({"text": "x", "kind": "text", "location": {"lineno": 1}})

    def test_not_an_array(self) -> None:
        with pytest.raises(SerializationError, match="JSON array"):
            from_json('{"text": "x"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("[")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_json("[1]")
