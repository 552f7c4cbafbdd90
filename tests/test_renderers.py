"""Tests for the markup and LLM span renderers."""

from latexspans import LlmRenderer, MarkupRenderer, Span, SpanKind, render_llm, render_markup, segment
from latexspans.renderers.protocol import SpanRenderer


class TestRenderMarkup:
    def test_restores_source(self) -> None:
        source = "Before #bold{B} $i$ $$d$$ \\[b\\] after"
        assert render_markup(segment(source)) == source

    def test_restores_escapes_and_unmatched(self) -> None:
        source = "Price: \\$5, open $$ never closed and \\\\[x"
        assert render_markup(segment(source)) == source

    def test_hand_built_spans(self) -> None:
        spans = [
            Span("see ", SpanKind.TEXT),
            Span("x", SpanKind.NAMED_UNNUMBERED_EQUATION),
            Span("y", SpanKind.UNDERLINE_TEXT),
        ]
        assert render_markup(spans) == "see \\begin{equation*}x\\end{equation*}#underline{y}"

    def test_empty(self) -> None:
        assert render_markup([]) == ""


class TestRenderLlm:
    def test_styles_are_plain(self) -> None:
        out = render_llm(segment("#bold{Hello} #italic{there} #underline{you}"))
        assert out == "Hello there you"

    def test_inline_math_label(self) -> None:
        assert render_llm(segment("Energy: $E = mc^2$")) == "Energy: [math] E = mc^2 [/math]"

    def test_display_math_on_own_line(self) -> None:
        out = render_llm(segment("See $$\n x^2 \n$$ here"))
        assert out == "See \n[display math] x^2 [/display math]\n here"

    def test_every_display_kind_labelled(self) -> None:
        source = "\\[a\\]\\begin{equation}b\\end{equation}\\begin{equation*}c\\end{equation*}"
        out = render_llm(segment(source))
        assert out.count("[display math]") == 3


class TestProtocol:
    def test_renderers_conform(self) -> None:
        def run(renderer: SpanRenderer) -> str:
            return renderer.render(segment("$x$"))

        assert run(MarkupRenderer()) == "$x$"
        assert run(LlmRenderer()) == "[math] x [/math]"
