"""Span serialization — JSON round-trip for span lists.

Converts spans to/from JSON-compatible dicts. Useful for:
- Golden files in tests (``to_tuples``)
- Handing spans to a typesetter running in another process
- Debugging and inspection

All JSON output is deterministic (sorted keys).

Example:
    from latexspans import segment
    from latexspans.serialization import to_json, from_json

    spans = segment("Energy: $E = mc^2$")
    restored = from_json(to_json(spans))
    assert restored == spans

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from latexspans.errors import SerializationError
from latexspans.location import SourceLocation
from latexspans.spans import Span, SpanKind


def to_tuples(spans: Sequence[Span]) -> list[tuple[str, SpanKind]]:
    """Return ``(text, kind)`` for every span, in order."""
    return [span.as_tuple() for span in spans]


def to_dict(span: Span) -> dict[str, Any]:
    """Convert a span to a JSON-compatible dict.

    Args:
        span: Span to convert.

    Returns:
        Dict with ``text``, ``kind`` (enum value) and ``location``.

    """
    return {
        "text": span.text,
        "kind": span.kind.value,
        "location": _location_to_dict(span.location),
    }


def _location_to_dict(loc: SourceLocation | None) -> dict[str, Any] | None:
    if loc is None:
        return None
    return {
        "lineno": loc.lineno,
        "col_offset": loc.col_offset,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
        "source_file": loc.source_file,
    }


def from_dict(data: dict[str, Any]) -> Span:
    """Reconstruct a span from a dict.

    Args:
        data: Dict as produced by to_dict. ``location`` is optional.

    Returns:
        Span (frozen dataclass).

    Raises:
        SerializationError: If ``text`` or ``kind`` is missing or invalid.

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a dict, got {type(data).__name__}")
    text = data.get("text")
    if not isinstance(text, str):
        raise SerializationError("Missing or non-string 'text' field in serialized span")
    raw_kind = data.get("kind")
    try:
        kind = SpanKind(raw_kind)
    except ValueError:
        raise SerializationError(f"Unknown span kind: {raw_kind!r}") from None

    raw_loc = data.get("location")
    location = None
    if raw_loc is not None:
        try:
            location = SourceLocation(
                lineno=raw_loc["lineno"],
                col_offset=raw_loc["col_offset"],
                offset=raw_loc.get("offset", 0),
                end_offset=raw_loc.get("end_offset", 0),
                source_file=raw_loc.get("source_file"),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise SerializationError(f"Malformed location: {raw_loc!r}") from e
    return Span(text, kind, location)


def to_json(spans: Sequence[Span], *, indent: int | None = None) -> str:
    """Serialize spans to a JSON array string.

    Args:
        spans: Spans to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(span) for span in spans], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Span]:
    """Deserialize spans from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        List of spans.

    Raises:
        SerializationError: If the JSON is invalid or is not an array of spans.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(raw, list):
        raise SerializationError(f"Expected a JSON array, got {type(raw).__name__}")
    return [from_dict(item) for item in raw]
