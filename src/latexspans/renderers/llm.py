"""LLM-optimized renderer — structured plain text for model consumption.

Style markers are dropped, equations are labelled explicitly. Display
equations sit on their own line; inline equations stay in the text flow.

Example:
    >>> from latexspans import segment
    >>> render_llm(segment("Energy: $E = mc^2$"))
    'Energy: [math] E = mc^2 [/math]'
"""

from collections.abc import Sequence

from latexspans.spans import Span, SpanKind
from latexspans.stringbuilder import StringBuilder


class LlmRenderer:
    """Render spans to labelled plain text for LLM consumption.

    No markup. Labels equations explicitly.
    """

    __slots__ = ()

    def render(self, spans: Sequence[Span]) -> str:
        """Render spans to LLM-friendly plain text."""
        sb = StringBuilder()
        for span in spans:
            self._render_span(span, sb)
        return sb.build()

    def _render_span(self, span: Span, sb: StringBuilder) -> None:
        match span.kind:
            case SpanKind.TEXT | SpanKind.BOLD_TEXT | SpanKind.ITALIC_TEXT | SpanKind.UNDERLINE_TEXT:
                sb.append(span.text)
            case SpanKind.INLINE_EQUATION:
                sb.append(f"[math] {span.text} [/math]")
            case _:
                content = span.text.strip()
                sb.append(f"\n[display math] {content} [/display math]\n")


def render_llm(spans: Sequence[Span]) -> str:
    """Render spans to LLM-friendly plain text.

    Args:
        spans: Spans in source order.

    Returns:
        Labelled plain text for LLM consumption.
    """
    return LlmRenderer().render(spans)
