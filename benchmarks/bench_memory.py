"""Benchmark: memory held by a Queue chain."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linkseq import Queue

_ITEMS: int = 100_000


def bench_chain_memory(items: int = _ITEMS) -> dict[str, object]:
    """Measure allocations made while enqueuing ``items`` integers.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb,
    bytes_per_node.
    """
    tracemalloc.start()
    queue: Queue[int] = Queue()
    for i in range(items):
        queue.enqueue(i)
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    result: dict[str, object] = {
        "operation": "queue_chain_memory",
        "iterations": items,
        "peak_memory_kb": round(peak / 1024, 2),
        "current_memory_kb": round(current / 1024, 2),
        "bytes_per_node": round(current / items, 1),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(
        f"[bench_memory] {result['operation']}: peak {result['peak_memory_kb']:.2f} KB, "
        f"{result['bytes_per_node']} bytes/node over {items} items"
    )
    return result


if __name__ == "__main__":
    result = bench_chain_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
