import time
import numpy as np
from notes2chord.errors import ChordSolverError
from notes2chord.notes import parse_notes
from notes2chord.resolver import resolve

_LETTERS = np.array(list("CDEFGAB"))
_ACCIDENTALS = np.array(["", "", "", "#", "b", "bb", "##"])


def random_queries(n, rng):
    """n random note strings of 1-4 tokens each."""
    sizes = rng.integers(1, 5, size=n)
    queries = []
    for size in sizes:
        letters = rng.choice(_LETTERS, size=size)
        accidentals = rng.choice(_ACCIDENTALS, size=size)
        queries.append(" ".join(l + a for l, a in zip(letters, accidentals)))
    return queries


def run_benchmark():
    # Setup
    rng = np.random.default_rng(42)
    queries = random_queries(100000, rng)

    # Benchmark
    resolved = 0
    start_time = time.perf_counter()
    for q in queries:
        try:
            resolve(parse_notes(q))
            resolved += 1
        except ChordSolverError:
            pass
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds "
          f"({resolved}/{len(queries)} queries resolved)")

if __name__ == '__main__':
    run_benchmark()
