"""Benchmark: Bag and Queue operation throughput.

Measures how many ``add`` calls, and how many ``enqueue``/``dequeue``
pairs, complete per second using the public linkseq API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linkseq import Bag, Queue

_ITERATIONS: int = 200_000


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / max(total, 1e-9), 1),
        "avg_latency_ms": round(total / iterations * 1000, 6),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.6f} ms"
    )
    return result


def bench_bag_add_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark ``Bag.add`` throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    bag: Bag[int] = Bag()
    start = time.perf_counter()
    for i in range(iterations):
        bag.add(i)
    total = time.perf_counter() - start
    return _report("bag_add_throughput", iterations, total)


def bench_queue_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark filling a Queue and draining it again.

    Each iteration is one ``enqueue`` plus one ``dequeue``.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    queue: Queue[int] = Queue()
    start = time.perf_counter()
    for i in range(iterations):
        queue.enqueue(i)
    while not queue.is_empty():
        queue.dequeue()
    total = time.perf_counter() - start
    return _report("queue_enqueue_dequeue_throughput", iterations, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_bag_add_throughput, "bag_throughput_baseline.json"),
        (bench_queue_throughput, "queue_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
