"""Source location tracking for spans.

Provides SourceLocation dataclass for tracking where a span sits in the
markup source. The region always covers the span's delimiters, so
``source[loc.offset:loc.end_offset]`` is the exact markup of the span.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a span.

    Line and column are 1-indexed. Offsets are absolute positions in the
    source string (end exclusive).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=20)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, 0, 10, "notes/intro.txt")
            >>> str(loc)
            'notes/intro.txt:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered, delimiters included."""
        return self.end_offset - self.offset

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for spans created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
