"""Thread safe: segment 1000 notes in parallel."""

from concurrent.futures import ThreadPoolExecutor

from latexspans import segment

docs = [f"Note {i}: #bold{{x}} equals $x_{i}$" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(segment, docs))

print(f"Segmented {len(results)} notes in parallel")
print("First note spans:", len(results[0]))
print("Last note spans:", len(results[-1]))
