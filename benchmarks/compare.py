"""Side-by-side summary of the linkseq benchmark results.

Reads the JSON files written by ``bench_throughput.py``,
``bench_latency.py`` and ``bench_memory.py`` and prints one Rich table:
Bag ``add`` throughput next to the Queue enqueue/dequeue cycle, enqueue
tail latency on a prefilled queue, and the memory cost of a chain node.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

RESULTS_DIR = Path(__file__).parent / "results"

RESULT_FILES: dict[str, str] = {
    "bag": "bag_throughput_baseline.json",
    "queue": "queue_throughput_baseline.json",
    "latency": "latency_baseline.json",
    "memory": "memory_baseline.json",
}


def load_results(results_dir: Path = RESULTS_DIR) -> dict[str, dict[str, object]]:
    """Return the saved results keyed by ``bag``/``queue``/``latency``/``memory``.

    Missing files are left out; unreadable ones are logged and left out.
    """
    results: dict[str, dict[str, object]] = {}
    for key, fname in RESULT_FILES.items():
        path = results_dir / fname
        if not path.exists():
            continue
        try:
            results[key] = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Skipping unreadable result file %s: %s", path, exc)
    return results


def _num(data: dict[str, object], field: str) -> float:
    return float(data.get(field, 0) or 0)  # type: ignore[arg-type]


def build_table(results: dict[str, dict[str, object]]) -> Table:
    """Lay out whatever results are present as a two-column table."""
    table = Table(title="linkseq benchmarks")
    table.add_column("Measurement", style="bold")
    table.add_column("Value", justify="right")

    bag = results.get("bag")
    queue = results.get("queue")
    if bag is not None:
        table.add_row("Bag.add", f"{_num(bag, 'ops_per_second'):,.0f} ops/s")
    if queue is not None:
        table.add_row("Queue enqueue+dequeue", f"{_num(queue, 'ops_per_second'):,.0f} ops/s")
    if bag is not None and queue is not None and _num(bag, "ops_per_second") > 0:
        ratio = _num(queue, "ops_per_second") / _num(bag, "ops_per_second")
        table.add_row("Queue cycle / Bag.add", f"{ratio:.2f}x")

    latency = results.get("latency")
    if latency is not None:
        prefill = int(_num(latency, "prefill"))
        table.add_row(
            f"enqueue p50 / p95 (prefill {prefill:,})",
            f"{_num(latency, 'p50_ms') * 1000:.2f} / {_num(latency, 'p95_ms') * 1000:.2f} us",
        )

    memory = results.get("memory")
    if memory is not None:
        table.add_row("Chain peak memory", f"{_num(memory, 'peak_memory_kb'):,.1f} KB")
        table.add_row("Bytes per node", f"{_num(memory, 'bytes_per_node'):.1f}")

    return table


def main(results_dir: Path = RESULTS_DIR) -> None:
    console = Console()
    results = load_results(results_dir)
    if not results:
        console.print(
            f"No results in {results_dir}. Run bench_throughput.py, "
            "bench_latency.py and bench_memory.py first."
        )
        return
    console.print(build_table(results))
    missing = sorted(set(RESULT_FILES) - set(results))
    if missing:
        console.print(f"[dim]not yet measured: {', '.join(missing)}[/dim]")


if __name__ == "__main__":
    main()
