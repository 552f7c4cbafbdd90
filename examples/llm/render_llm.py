"""Label equations for an LLM prompt and rebuild the original markup."""

from latexspans import render_llm, render_markup, segment

source = "Energy: #bold{Einstein} wrote $E = mc^2$.\\[ F = ma \\]"
spans = segment(source)

print(render_llm(spans))
print("Lossless:", render_markup(spans) == source)
