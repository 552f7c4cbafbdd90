"""Thread safety tests for the segmenter.

Segmenting is pure: many threads segmenting independent inputs must get
exactly what a single thread gets.
"""

from concurrent.futures import ThreadPoolExecutor

from latexspans import segment, segment_many


def _document(i: int) -> str:
    return (
        f"Section {i}: #bold{{title {i}}}\n"
        f"Inline $x_{i}$ and display $$\n\\sum_{{k=0}}^{{{i}}} k\n$$\n"
        f"\\begin{{equation}}y = {i}x\\end{{equation}} escaped \\$ {i}"
    )


class TestSegmenterThreadSafety:
    def test_parallel_matches_serial(self) -> None:
        docs = [_document(i) for i in range(200)]
        serial = [segment(doc) for doc in docs]

        with ThreadPoolExecutor(max_workers=8) as ex:
            parallel = list(ex.map(segment, docs))

        assert parallel == serial

    def test_segment_many_matches_segment(self) -> None:
        docs = [_document(i) for i in range(20)]
        assert segment_many(docs) == [segment(doc) for doc in docs]

    def test_segment_many_in_threads(self) -> None:
        batches = [[_document(i), _document(i + 1)] for i in range(0, 40, 2)]

        with ThreadPoolExecutor(max_workers=4) as ex:
            results = list(ex.map(segment_many, batches))

        assert [spans for batch in results for spans in batch] == [
            segment(_document(i)) for i in range(40)
        ]
