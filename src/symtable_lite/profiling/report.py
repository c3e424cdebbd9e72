"""Report generation for benchmark results.

Formats BenchmarkResult and TableStats into plain-text tables for
terminal output.
"""
from __future__ import annotations

from symtable_lite.profiling.harness import BenchmarkResult
from symtable_lite.table.hash_table import TableStats


def _pct(part: float, whole: float) -> str:
    if whole <= 0:
        return "0.0%"
    return f"{part / whole * 100:.1f}%"


def format_stats(stats: TableStats) -> str:
    """Format the shape of a hash table."""
    lines = [
        f"Bindings:          {stats.length:,}",
        f"Buckets:           {stats.bucket_count:,}",
        f"Load factor:       {stats.load_factor:.3f}",
        f"Longest chain:     {stats.longest_chain}",
        f"Empty buckets:     {stats.empty_buckets:,} "
        f"({_pct(stats.empty_buckets, stats.bucket_count)})",
        f"Resizes:           {stats.resizes}",
        f"Ladder exhausted:  {'yes' if stats.saturated else 'no'}",
    ]
    return "\n".join(lines)


def format_report(result: BenchmarkResult, label: str | None = None) -> str:
    """Format a BenchmarkResult as a readable report string."""
    total = result.total_time_ms
    lines = [
        f"=== {label or result.backend + ' backend'} ===",
        f"Keys:              {result.num_keys:,}",
        f"Total time:        {total:.1f} ms",
        f"Throughput:        {result.ops_per_sec:,.0f} ops/sec",
        f"Lookup errors:     {result.lookup_errors}",
        "",
        "Breakdown:",
        f"  Insert:          {result.insert_time_ms:.1f} ms "
        f"({_pct(result.insert_time_ms, total)})",
        f"  Lookup (hit):    {result.hit_time_ms:.1f} ms "
        f"({_pct(result.hit_time_ms, total)})",
        f"  Lookup (miss):   {result.miss_time_ms:.1f} ms "
        f"({_pct(result.miss_time_ms, total)})",
        f"  Remove:          {result.remove_time_ms:.1f} ms "
        f"({_pct(result.remove_time_ms, total)})",
    ]
    if result.stats is not None:
        lines.append("")
        lines.append("Table at capacity:")
        lines.extend("  " + line for line in format_stats(result.stats).splitlines())
    return "\n".join(lines)


def format_comparison(baseline: BenchmarkResult, candidate: BenchmarkResult) -> str:
    """Side-by-side phase timings with the candidate's speedup."""

    def _speedup(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        return f"{old / new:.1f}x"

    rows = [
        ("Insert (ms)", baseline.insert_time_ms, candidate.insert_time_ms),
        ("Lookup hit (ms)", baseline.hit_time_ms, candidate.hit_time_ms),
        ("Lookup miss (ms)", baseline.miss_time_ms, candidate.miss_time_ms),
        ("Remove (ms)", baseline.remove_time_ms, candidate.remove_time_ms),
        ("Total (ms)", baseline.total_time_ms, candidate.total_time_ms),
    ]
    lines = [
        f"{'Metric':<20} {baseline.backend:>12} {candidate.backend:>12} {'Speedup':>10}",
        "-" * 56,
    ]
    for name, old, new in rows:
        lines.append(f"{name:<20} {old:>12.1f} {new:>12.1f} {_speedup(old, new):>10}")
    return "\n".join(lines)
