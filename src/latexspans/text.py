"""Extract plain text from spans.

Example:
    >>> from latexspans import segment, extract_text
    >>> extract_text(segment("Before #bold{Hello, World!} After"))
    'Before Hello, World! After'
"""

from collections.abc import Iterable

from latexspans.spans import Span, SpanKind


def extract_text(spans: Iterable[Span], *, include_equations: bool = True) -> str:
    """Concatenate span texts with every delimiter stripped.

    Args:
        spans: Spans in source order.
        include_equations: When False, equation spans contribute nothing.

    Returns:
        The visible text of the spans.

    """
    return "".join(
        span.text for span in spans if include_equations or not span.kind.is_equation
    )


def equations(spans: Iterable[Span]) -> list[Span]:
    """Return the equation spans, in order."""
    return [span for span in spans if span.kind.is_equation]


def count_kinds(spans: Iterable[Span]) -> dict[SpanKind, int]:
    """Count spans per kind. Kinds that do not occur are omitted."""
    counts: dict[SpanKind, int] = {}
    for span in spans:
        counts[span.kind] = counts.get(span.kind, 0) + 1
    return counts
