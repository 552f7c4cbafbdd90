"""Span and SpanKind definitions for the latexspans segmenter.

The segmenter produces a list of Span objects that typesetters and view
composers consume. Each Span has a kind, the verbatim captured text, and
an optional source location.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
SpanKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from latexspans.location import SourceLocation


class SpanKind(Enum):
    """Kinds of span produced by the segmenter.

    Organized by category:
    - Plain text
    - Inline styles (#bold{}, #italic{}, #underline{})
    - Equations, distinguished by their delimiter syntax

    """

    # Plain text
    TEXT = "text"

    # Inline styles
    BOLD_TEXT = "bold_text"  # #bold{...}
    ITALIC_TEXT = "italic_text"  # #italic{...}
    UNDERLINE_TEXT = "underline_text"  # #underline{...}

    # Equations
    INLINE_EQUATION = "inline_equation"  # $...$
    DISPLAY_EQUATION = "display_equation"  # $$...$$
    BLOCK_EQUATION = "block_equation"  # \[...\]
    NAMED_EQUATION = "named_equation"  # \begin{equation}...\end{equation}
    NAMED_UNNUMBERED_EQUATION = "named_unnumbered_equation"  # \begin{equation*}...

    @property
    def is_equation(self) -> bool:
        """True for all five equation kinds."""
        return self in _EQUATION_KINDS

    @property
    def is_display(self) -> bool:
        """True for equations rendered on their own line (all but inline)."""
        return self in _EQUATION_KINDS and self is not SpanKind.INLINE_EQUATION

    @property
    def is_style(self) -> bool:
        """True for bold, italic and underline text."""
        return self in _STYLE_KINDS


_STYLE_KINDS: frozenset[SpanKind] = frozenset(
    {SpanKind.BOLD_TEXT, SpanKind.ITALIC_TEXT, SpanKind.UNDERLINE_TEXT}
)

_EQUATION_KINDS: frozenset[SpanKind] = frozenset(
    {
        SpanKind.INLINE_EQUATION,
        SpanKind.DISPLAY_EQUATION,
        SpanKind.BLOCK_EQUATION,
        SpanKind.NAMED_EQUATION,
        SpanKind.NAMED_UNNUMBERED_EQUATION,
    }
)


@dataclass(frozen=True, slots=True)
class Span:
    """A classified, contiguous region of the markup source.

    Attributes:
        text: The exact substring captured for this span. For styled and
            equation spans this is the content between the delimiters,
            unmodified (no trimming of whitespace or line breaks).
        kind: The span kind (from SpanKind enum)
        location: Region of the span in the source, delimiters included.
            Excluded from comparison so hand-built spans compare equal to
            segmented ones.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    text: str
    kind: SpanKind = SpanKind.TEXT
    location: SourceLocation | None = field(default=None, compare=False)

    @property
    def is_equation(self) -> bool:
        """Whether the span holds an equation."""
        return self.kind.is_equation

    @property
    def is_display(self) -> bool:
        """Whether the span is a display-mode equation."""
        return self.kind.is_display

    def as_tuple(self) -> tuple[str, SpanKind]:
        """Return ``(text, kind)``."""
        return (self.text, self.kind)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        if self.location is None:
            return f"Span({self.kind.name}, {val!r})"
        return f"Span({self.kind.name}, {val!r}, {self.location.lineno}:{self.location.col_offset})"
