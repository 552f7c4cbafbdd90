"""Span renderers for latexspans.

Provides:
- MarkupRenderer: spans back to the original markup
- LlmRenderer: labelled plain text for model consumption
- SpanRenderer: protocol shared by both
"""

from latexspans.renderers.llm import LlmRenderer, render_llm
from latexspans.renderers.markup import MarkupRenderer, render_markup
from latexspans.renderers.protocol import SpanRenderer

__all__ = [
    "LlmRenderer",
    "MarkupRenderer",
    "SpanRenderer",
    "render_llm",
    "render_markup",
]
