"""cProfile wrapper for latexspans segmentation.

Run with:
    python benchmarks/profile_segment.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys


def build_corpus(size: int = 200) -> list[str]:
    """Build a corpus of mixed markup documents."""
    return [
        (
            f"Note {i}: #bold{{key}} idea with $x_{i}$ and\n"
            f"$$\n\\frac{{{i}}}{{2}}\n$$\n"
            f"\\begin{{equation}}y = {i}\\end{{equation}} escaped \\$ and open $$ here"
        )
        for i in range(size)
    ]


def segment_corpus(iterations: int = 20) -> None:
    """Segment the corpus multiple times."""
    from latexspans import segment

    docs = build_corpus()
    for _ in range(iterations):
        for doc in docs:
            segment(doc)


def main() -> None:
    """Run profiling and print results."""
    print("latexspans Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    profiler = cProfile.Profile()
    profiler.enable()
    segment_corpus()
    profiler.disable()

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream).sort_stats("cumulative")
    stats.print_stats(20)
    print(stream.getvalue())


if __name__ == "__main__":
    main()
