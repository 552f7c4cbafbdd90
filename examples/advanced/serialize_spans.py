"""Hand spans to another process: JSON round-trip."""

from latexspans import segment
from latexspans.serialization import from_json, to_json

spans = segment("Area of a circle: \\[ A = \\pi r^2 \\]")

json_str = to_json(spans)
restored = from_json(json_str)

print("Original == restored:", spans == restored)
print("JSON length:", len(json_str), "chars")
