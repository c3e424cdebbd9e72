"""symtable-lite CLI entry point.

Usage: symtable-lite [-v] [command]
"""
import argparse
import logging
import sys


def _add_bench_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bench",
        help="Time insert/lookup/remove phases on a backend.",
    )
    p.add_argument(
        "--keys", type=int, default=5_000,
        help="Number of distinct keys to insert (default: 5000)",
    )
    p.add_argument(
        "--backend", choices=("hash", "list"), default=None,
        help="Backend to benchmark (default: hash)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )
    p.add_argument(
        "--compare", action="store_true",
        help="Run list then hash and print a side-by-side comparison. "
             "Cannot be combined with --backend or --cprofile.",
    )


def _add_stats_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "stats",
        help="Fill a hash table with generated keys and print its shape.",
    )
    p.add_argument(
        "--keys", type=int, default=10_000,
        help="Number of distinct keys to insert (default: 10000)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )


def _run_bench(args: argparse.Namespace) -> None:
    from symtable_lite.profiling.harness import run_benchmark
    from symtable_lite.profiling.report import format_comparison, format_report

    if args.compare:
        baseline = run_benchmark("list", num_keys=args.keys, seed=args.seed)
        candidate = run_benchmark("hash", num_keys=args.keys, seed=args.seed)
        print(format_report(baseline))
        print()
        print(format_report(candidate))
        print()
        print(format_comparison(baseline, candidate))
    else:
        result = run_benchmark(
            args.backend or "hash", num_keys=args.keys, seed=args.seed,
            profile=args.cprofile,
        )
        print(format_report(result))
        if result.cprofile_stats:
            print()
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)


def _run_stats(args: argparse.Namespace) -> None:
    from symtable_lite.profiling.load_generator import KeyWorkload
    from symtable_lite.profiling.report import format_stats
    from symtable_lite.table.hash_table import HashSymTable

    keys = KeyWorkload(seed=args.seed).generate_keys(args.keys)
    with HashSymTable() as table:
        for i, key in enumerate(keys):
            table.put(key, i)
        print(format_stats(table.stats()))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="symtable-lite",
        description="String-keyed symbol tables -- pure Python, no dependencies.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log table resizes and other debug events to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_bench_parser(subparsers)
    _add_stats_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.keys <= 0:
        parser.error(f"--keys must be positive, got {args.keys}")

    if args.command == "bench":
        if args.compare and (args.backend is not None or args.cprofile):
            parser.error("--compare runs both backends unprofiled; "
                         "drop --backend and --cprofile")
        _run_bench(args)
    elif args.command == "stats":
        _run_stats(args)
