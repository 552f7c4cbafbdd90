"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large mixed markup document (~100KB)."""
    sections = []
    for i in range(300):
        sections.append(f"""
Section {i} has #bold{{bold}}, #italic{{italic}} and #underline{{underlined}} text.
Inline math $a_{i} + b_{i}$ sits next to a price of \\$ {i}.

$$
\\int_0^{{{i}}} x^2 \\, dx
$$

\\begin{{equation}}
  E_{i} = m c^2
\\end{{equation}}

\\begin{{equation*}}
  \\sum_{{k=0}}^{{{i}}} k
\\end{{equation*}}

And a block \\[ f(x) = {i}x + 2 \\] to close.
""")
    return "\n".join(sections)


@pytest.fixture
def unmatched_document() -> str:
    """Pathological input: many opens without a partner."""
    return "#bold{ \\[ " * 2000
