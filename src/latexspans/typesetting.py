"""Typesetter protocol and service for equation spans.

latexspans does not typeset anything itself. A typesetter (MathJax, KaTeX,
a LaTeX toolchain, ...) is injected into an explicitly constructed
TypesetService, which owns it for its lifetime and hands it every equation
span as ``(text, display)``.

Usage:
    from latexspans import segment
    from latexspans.typesetting import TypesetService

    class SvgTypesetter:
        def typeset(self, tex: str, *, display: bool) -> str | None:
            return my_tex_to_svg(tex, display=display)

    with TypesetService(SvgTypesetter(), color=(0.0, 0.0, 0.0)) as service:
        rendered = service.render(segment(source))

Failure policy:
    A typesetter that raises or returns None leaves the span unrendered
    (``artifact`` is None) and the caller shows the raw equation text.
    Segmentation is never affected.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Protocol, runtime_checkable

from latexspans.spans import Span
from latexspans.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Typesetter(Protocol):
    """Protocol for equation typesetters.

    Thread Safety:
        Implementations used from several threads must be thread-safe;
        TypesetService adds no locking.
    """

    def typeset(self, tex: str, *, display: bool) -> Any | None:
        """Convert equation source to a displayable artifact.

        Args:
            tex: Equation source, possibly prefixed with a color command
            display: True for display-mode equations, False for inline

        Returns:
            The artifact (image, SVG string, ...) or None when the
            equation cannot be typeset.
        """
        ...


@dataclass(frozen=True, slots=True)
class TypesetSpan:
    """A span together with its typeset artifact.

    Attributes:
        span: The segmented span
        artifact: Typesetter output, or None for non-equation spans and
            equations that failed to typeset

    """

    span: Span
    artifact: Any | None = None

    @property
    def rendered(self) -> bool:
        return self.artifact is not None


def color_command(components: Sequence[float]) -> str | None:
    """Build the LaTeX command that colors an equation.

    Args:
        components: 2 components (gray, alpha) or 3-4 (RGB, alpha ignored),
            each in 0..1.

    Returns:
        ``\\definecolor{custom}{rgb}{r, g, b} \\color{custom}``, or None when
        the component count is not supported.

    Example:
        >>> color_command((1.0, 0.0, 0.0))
        '\\\\definecolor{custom}{rgb}{1.0, 0.0, 0.0} \\\\color{custom}'
    """
    if len(components) == 2:
        r = g = b = components[0]
    elif len(components) >= 3:
        r, g, b = components[0], components[1], components[2]
    else:
        return None
    return f"\\definecolor{{custom}}{{rgb}}{{{r}, {g}, {b}}} \\color{{custom}}"


class TypesetService:
    """Sends equation spans to an injected typesetter.

    The service is constructed explicitly and passed to whoever needs it;
    there is no process-wide instance. It owns the typesetter's lifecycle:
    ``close()`` (or leaving the ``with`` block) calls the typesetter's own
    ``close()`` when it has one.

    Usage:
        >>> class Echo:
        ...     def typeset(self, tex, *, display):
        ...         return ("display" if display else "inline", tex)
        >>> from latexspans import segment
        >>> service = TypesetService(Echo())
        >>> [item.artifact for item in service.render(segment("a $x$"))]
        [None, ('inline', 'x')]

    """

    __slots__ = ("_closed", "_color_prefix", "_typesetter")

    def __init__(
        self,
        typesetter: Typesetter,
        *,
        color: Sequence[float] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            typesetter: Collaborator that converts equations
            color: Optional text color components (see color_command).
                An unsupported color disables typesetting: every span is
                returned unrendered.
        """
        self._typesetter = typesetter
        self._closed = False
        if color is None:
            self._color_prefix: str | None = ""
        else:
            self._color_prefix = color_command(color)
            if self._color_prefix is None:
                logger.warning(
                    "Unsupported color with %d components; equations stay unrendered",
                    len(color),
                )

    @property
    def typesetter(self) -> Typesetter:
        return self._typesetter

    @property
    def closed(self) -> bool:
        return self._closed

    def render(self, spans: Sequence[Span]) -> list[TypesetSpan]:
        """Typeset every equation span.

        Args:
            spans: Spans in source order.

        Returns:
            One TypesetSpan per input span, same order.

        Raises:
            RuntimeError: If the service has been closed.
        """
        if self._closed:
            raise RuntimeError("TypesetService is closed")
        return [self._render_span(span) for span in spans]

    def _render_span(self, span: Span) -> TypesetSpan:
        if not span.is_equation or self._color_prefix is None:
            return TypesetSpan(span)
        try:
            artifact = self._typesetter.typeset(
                f"{self._color_prefix}{span.text}", display=span.is_display
            )
        except Exception:
            logger.debug("Typesetting failed for %r", span, exc_info=True)
            return TypesetSpan(span)
        return TypesetSpan(span, artifact)

    def close(self) -> None:
        """Release the typesetter. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        close = getattr(self._typesetter, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> TypesetService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
