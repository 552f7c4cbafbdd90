"""Exception classes for latexspans.

Segmentation itself never raises: unmatched or escaped markup degrades to
plain text. These exceptions cover the surrounding surfaces (configuration,
serialization and typesetting collaborators).
"""

from __future__ import annotations


class LatexSpansError(Exception):
    """Base exception for all latexspans errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LatexSpansError):
    """Invalid segmenter configuration."""

    pass


class SerializationError(LatexSpansError, ValueError):
    """Error while restoring spans from a dict or JSON payload."""

    pass


class TypesetError(LatexSpansError):
    """Error raised by a typesetter while converting an equation.

    The TypesetService catches it (and any other collaborator exception)
    and leaves the span unrendered.
    """

    def __init__(self, tex: str, message: str) -> None:
        """Initialize typeset error.

        Args:
            tex: Equation source that failed to typeset
            message: Description of the failure
        """
        self.tex = tex
        preview = tex if len(tex) <= 40 else tex[:37] + "..."
        super().__init__(f"Cannot typeset {preview!r}: {message}")
