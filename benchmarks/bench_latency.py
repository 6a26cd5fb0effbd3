"""Benchmark: Queue.enqueue latency (p50/p95/mean) on a long queue.

Enqueue appends through the tail reference, so per-call latency should
not grow with the number of items already queued.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linkseq import Queue

_PREFILL: int = 100_000
_ITERATIONS: int = 3_000


def bench_enqueue_latency(prefill: int = _PREFILL) -> dict[str, object]:
    """Benchmark ``enqueue`` latency after ``prefill`` items are queued.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    queue: Queue[int] = Queue()
    for i in range(prefill):
        queue.enqueue(i)

    latencies_ms: list[float] = []
    for i in range(_ITERATIONS):
        t0 = time.perf_counter()
        queue.enqueue(i)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    # guard against a zero total on coarse clocks
    total = max(sum(latencies_ms) / 1000, 1e-9)

    result: dict[str, object] = {
        "operation": "queue_enqueue_latency",
        "prefill": prefill,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 6),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 6),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 6),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 6),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.6f}ms  p95={result['p95_ms']:.6f}ms  "
        f"mean={result['avg_latency_ms']:.6f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_enqueue_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
