"""Benchmark: intake and save throughput.

Measures how many full request cycles (register, read, validate, save)
complete per second against the in-memory store, for a first save that
inserts every language and for repeated saves that only update.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from i18nform import ElementRegistry, InMemoryItemStore, Language, LanguageCatalog

_ITERATIONS: int = 2_000
_LANGUAGES: int = 8

_CATALOG = LanguageCatalog.static(
    [Language(language_id, f"l{language_id}") for language_id in range(1, _LANGUAGES + 1)]
)
_FORM = {
    "title_i18n": {str(language_id): f"Title {language_id}" for language_id in range(1, _LANGUAGES + 1)},
    "description": "Plain description",
}


def _cycle(store: InMemoryItemStore, item_key: str) -> None:
    registry = ElementRegistry(store=store, languages=_CATALOG, cache=_CATALOG)
    registry.register("title")
    registry.register("description")
    registry.read_values(_FORM)
    if registry.validate_value("title"):
        registry.save("title", item_key, "wcf.page", 42)


def _result(operation: str, iterations: int, total: float) -> dict[str, object]:
    total = max(total, 1e-9)
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "languages": _LANGUAGES,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_insert_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark request cycles whose save inserts every language.

    Returns
    -------
    dict with keys: operation, iterations, languages, total_seconds,
    ops_per_second, avg_latency_ms.
    """
    store = InMemoryItemStore(categories=["wcf.page"])
    start = time.perf_counter()
    for index in range(iterations):
        _cycle(store, f"wcf.page.title{index}")
    total = time.perf_counter() - start
    return _result("save_insert_throughput", iterations, total)


def bench_update_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark request cycles whose save only updates existing items.

    Returns
    -------
    dict with keys: operation, iterations, languages, total_seconds,
    ops_per_second, avg_latency_ms.
    """
    store = InMemoryItemStore(categories=["wcf.page"])
    _cycle(store, "wcf.page.title")
    start = time.perf_counter()
    for _ in range(iterations):
        _cycle(store, "wcf.page.title")
    total = time.perf_counter() - start
    return _result("save_update_throughput", iterations, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_insert_throughput, "insert_throughput_baseline.json"),
        (bench_update_throughput, "update_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
