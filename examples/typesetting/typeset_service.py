"""Plug a typesetter into an explicitly constructed TypesetService.

The typesetter here just wraps the TeX source in a fake SVG. A real one
would call MathJax, KaTeX or a LaTeX toolchain. Failures are swallowed and
the span is shown as raw text.

Run::

    python examples/typesetting/typeset_service.py

"""

from latexspans import TypesetError, TypesetService, segment


class FakeSvgTypesetter:
    def typeset(self, tex: str, *, display: bool) -> str:
        if "\\undefined" in tex:
            raise TypesetError(tex, "undefined control sequence")
        mode = "display" if display else "inline"
        return f'<svg data-mode="{mode}">{tex}</svg>'

    def close(self) -> None:
        print("typesetter closed")


source = "Inline $a^2$, display $$b^2$$ and a broken $\\undefined$."

with TypesetService(FakeSvgTypesetter(), color=(0.2, 0.2, 0.2)) as service:
    for item in service.render(segment(source)):
        shown = item.artifact if item.rendered else item.span.text
        print(f"{item.span.kind.name:<18} {shown}")
