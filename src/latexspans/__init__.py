"""
latexspans — split text, style and LaTeX equation markup into typed spans

A single-pass segmenter for strings that mix plain text, #bold{...},
#italic{...} and #underline{...} styles, and LaTeX equations written as
$...$, $$...$$, \\[...\\], \\begin{equation}...\\end{equation} or
\\begin{equation*}...\\end{equation*}. Unmatched or escaped delimiters never
raise: they stay plain text.

Quick Start:
    >>> from latexspans import segment
    >>> spans = segment("Before #bold{Hello} and $x^2$")
    >>> [(s.text, s.kind.name) for s in spans]
    [('Before ', 'TEXT'), ('Hello', 'BOLD_TEXT'), (' and ', 'TEXT'), ('x^2', 'INLINE_EQUATION')]

Typesetting:
    >>> from latexspans import TypesetService
    >>> with TypesetService(my_typesetter) as service:
    ...     rendered = service.render(spans)

Installation:
    pip install latexspans           # Segmenter (zero deps)
    pip install latexspans[test]     # + pytest and Hypothesis
"""

from latexspans.config import (
    SegmentConfig,
    get_segment_config,
    reset_segment_config,
    segment_config_context,
    set_segment_config,
)
from latexspans.errors import ConfigError, LatexSpansError, SerializationError, TypesetError
from latexspans.location import SourceLocation
from latexspans.renderers import LlmRenderer, MarkupRenderer, SpanRenderer, render_llm, render_markup
from latexspans.rules import DEFAULT_RULES, DelimiterRule, delimiters_for, is_escaped
from latexspans.segmenter import Segmenter, segment
from latexspans.serialization import from_dict, from_json, to_dict, to_json, to_tuples
from latexspans.spans import Span, SpanKind
from latexspans.text import count_kinds, equations, extract_text
from latexspans.typesetting import TypesetService, TypesetSpan, Typesetter, color_command

__version__ = "0.1.0"


def segment_many(
    sources: list[str] | tuple[str, ...],
    *,
    config: SegmentConfig | None = None,
) -> list[list[Span]]:
    """Segment several sources with one configuration.

    Args:
        sources: Markup source strings
        config: Segment configuration (defaults to the context config,
            read once for the whole batch)

    Returns:
        One span list per source, same order.

    Example:
        >>> [len(spans) for spans in segment_many(["$a$", "b", ""])]
        [1, 1, 0]
    """
    if config is None:
        config = get_segment_config()
    return [Segmenter(source, config).segment() for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "segment",
    "segment_many",
    "Segmenter",
    # Spans
    "Span",
    "SpanKind",
    "SourceLocation",
    # Delimiter rules
    "DEFAULT_RULES",
    "DelimiterRule",
    "delimiters_for",
    "is_escaped",
    # Configuration (ContextVar-based)
    "SegmentConfig",
    "get_segment_config",
    "set_segment_config",
    "reset_segment_config",
    "segment_config_context",
    # Text helpers
    "extract_text",
    "equations",
    "count_kinds",
    # Renderers
    "SpanRenderer",
    "MarkupRenderer",
    "LlmRenderer",
    "render_markup",
    "render_llm",
    # Serialization
    "to_tuples",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Typesetting collaborator
    "Typesetter",
    "TypesetService",
    "TypesetSpan",
    "color_command",
    # Errors
    "LatexSpansError",
    "ConfigError",
    "SerializationError",
    "TypesetError",
]
