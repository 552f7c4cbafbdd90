"""Benchmark segmentation of typical and pathological inputs.

Run with:
    pytest benchmarks/benchmark_segment.py -v --benchmark-only
"""

try:
    import pytest

    from latexspans import segment

    @pytest.mark.benchmark(group="segment")
    def test_benchmark_large_document(benchmark, large_document):
        """Segment a ~100KB document with every delimiter kind."""
        spans = benchmark(segment, large_document)
        assert spans

    @pytest.mark.benchmark(group="segment")
    def test_benchmark_plain_text(benchmark):
        """Segment text without any marker character."""
        source = "Plain prose without markup. " * 4000
        spans = benchmark(segment, source)
        assert len(spans) == 1

    @pytest.mark.benchmark(group="segment-worst-case")
    def test_benchmark_unmatched_opens(benchmark, unmatched_document):
        """Every open marker scans to the end of input before failing."""
        spans = benchmark(segment, unmatched_document)
        assert len(spans) == 1

except ImportError:
    pass
