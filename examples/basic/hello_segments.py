"""Split mixed markup into spans with the default config."""

from latexspans import segment

for span in segment("Before #bold{Hello, World!} and $E = mc^2$"):
    print(f"{span.kind.name:<16} {span.text!r}")
