"""SpanRenderer protocol — stable interface for span renderers.

Any renderer that implements ``render(spans) -> str`` conforms to this protocol.

Example:
    from latexspans.renderers.protocol import SpanRenderer

    def render_note(renderer: SpanRenderer, source: str) -> str:
        return renderer.render(segment(source))

"""

from collections.abc import Sequence
from typing import Protocol

from latexspans.spans import Span


class SpanRenderer(Protocol):
    """Protocol for span renderers.

    Implementations must accept a span sequence and return a rendered string.

    """

    def render(self, spans: Sequence[Span]) -> str:
        """Render spans to a string.

        Args:
            spans: Spans in source order.

        Returns:
            Rendered string output.

        """
        ...
