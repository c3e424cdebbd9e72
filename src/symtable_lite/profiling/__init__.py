"""Benchmark harness and workload generation for symtable-lite."""

from symtable_lite.profiling.harness import BenchmarkResult, run_benchmark
from symtable_lite.profiling.load_generator import KeyWorkload, Op, OpKind
from symtable_lite.profiling.report import (
    format_comparison,
    format_report,
    format_stats,
)

__all__ = [
    "BenchmarkResult",
    "KeyWorkload",
    "Op",
    "OpKind",
    "format_comparison",
    "format_report",
    "format_stats",
    "run_benchmark",
]
