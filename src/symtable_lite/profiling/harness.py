"""Benchmark harness for the symbol table backends.

Runs the same four phases against a backend and times each one:

  1. insert N distinct keys
  2. look up every inserted key (hits), checking the stored value
  3. look up N keys that were never inserted (misses)
  4. remove every inserted key

For the hash backend the table shape (bucket count, longest chain,
resizes) is captured between phases 3 and 4, while the table is full.

The list backend is quadratic over a run, so keep N modest when
benchmarking it (a few thousand keys).
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from symtable_lite.api import BACKENDS
from symtable_lite.profiling.load_generator import KeyWorkload
from symtable_lite.table.hash_table import HashSymTable, TableStats

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing results from a single benchmark run."""
    backend: str
    num_keys: int
    insert_time_ms: float
    hit_time_ms: float
    miss_time_ms: float
    remove_time_ms: float
    total_time_ms: float
    ops_per_sec: float
    lookup_errors: int
    stats: TableStats | None = None
    cprofile_stats: str | None = None


def run_benchmark(
    backend: str = "hash",
    num_keys: int = 5_000,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Run all four phases against backend and return timing data.

    lookup_errors counts hits that returned the wrong value and misses
    that returned anything; a correct backend always reports 0.
    """
    try:
        cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown backend: {backend}") from None
    if num_keys <= 0:
        raise ValueError(f"num_keys must be positive, got {num_keys}")

    workload = KeyWorkload(seed=seed)
    keys = workload.generate_keys(num_keys)
    missing = workload.generate_keys(num_keys)
    table = cls()

    insert_ms = hit_ms = miss_ms = remove_ms = 0.0
    errors = 0
    stats: TableStats | None = None

    def _run():
        nonlocal insert_ms, hit_ms, miss_ms, remove_ms, errors, stats

        t0 = time.perf_counter()
        for i, key in enumerate(keys):
            table.put(key, i)
        insert_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        for i, key in enumerate(keys):
            if table.get(key) != i:
                errors += 1
        hit_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        for key in missing:
            if table.contains(key):
                errors += 1
        miss_ms = (time.perf_counter() - t0) * 1000

        if isinstance(table, HashSymTable):
            stats = table.stats()

        t0 = time.perf_counter()
        for key in keys:
            table.remove(key)
        remove_ms = (time.perf_counter() - t0) * 1000

    cprofile_text = None
    t_total_start = time.perf_counter()
    try:
        if profile:
            pr = cProfile.Profile()
            pr.enable()
            try:
                _run()
            finally:
                pr.disable()
            s = io.StringIO()
            ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
            ps.print_stats(20)
            cprofile_text = s.getvalue()
        else:
            _run()
        total_ms = (time.perf_counter() - t_total_start) * 1000
    finally:
        table.free()

    if errors:
        log.error("%s backend returned %d wrong lookups", backend, errors)

    total_ops = num_keys * 4
    ops = total_ops / (total_ms / 1000) if total_ms > 0 else 0

    return BenchmarkResult(
        backend=backend,
        num_keys=num_keys,
        insert_time_ms=insert_ms,
        hit_time_ms=hit_ms,
        miss_time_ms=miss_ms,
        remove_time_ms=remove_ms,
        total_time_ms=total_ms,
        ops_per_sec=ops,
        lookup_errors=errors,
        stats=stats,
        cprofile_stats=cprofile_text,
    )
