"""
Microbenchmark: time per query vs hull size.
Run:
  python benchmarks/bench_intersect.py
"""
import time
import numpy as np
from hull_collision import Collision, GjkAlgorithm
from hull_collision.logging_utils import setup_default_logging
from hull_collision.profiler import Profiler

def sphere_hull(n: int, radius: float = 1.0) -> np.ndarray:
    # Fibonacci sphere: evenly spread points, all on the hull
    i = np.arange(n, dtype=np.float64) + 0.5
    phi = np.arccos(1.0 - 2.0 * i / n)
    theta = np.pi * (1.0 + 5.0**0.5) * i
    return radius * np.stack([np.cos(theta) * np.sin(phi), np.sin(theta) * np.sin(phi), np.cos(phi)], axis=1)

def run(n: int, queries: int = 300):
    prof = Profiler()
    algorithm = GjkAlgorithm(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    base = sphere_hull(n)
    offsets = rng.uniform(-2.5, 2.5, size=(queries, 3))

    # warmup
    for off in offsets[:20]:
        algorithm.intersect(base, base + off, Collision())
    prof.stats.reset()

    hits = 0
    t0 = time.perf_counter()
    for off in offsets:
        hits += algorithm.intersect(base, base + off, Collision())
    t1 = time.perf_counter()

    per_query = (t1 - t0) / queries
    return per_query, hits, prof.stats.summary()

if __name__ == "__main__":
    setup_default_logging("WARNING")
    for n in [8, 32, 128, 512, 2048]:
        per_query, hits, summary = run(n)
        print(f"N={n:5d}  query={1e3*per_query:8.3f} ms  queries/s={1/per_query:8.1f}  hits={hits}")
        for k in ["gjk", "epa"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
