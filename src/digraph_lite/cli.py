"""digraph-lite CLI entry point.

Usage: uv run digraph-lite [command]
"""
import argparse
import logging
import sys


def _add_bench_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bench",
        help="Time every algorithm on seeded random graphs.",
    )
    p.add_argument(
        "--vertices", type=int, default=2_000,
        help="Vertices in the random DAG (default: 2000)",
    )
    p.add_argument(
        "--apsp-vertices", type=int, default=120,
        help="Vertices in the Floyd-Warshall / SCC digraph (default: 120)",
    )
    p.add_argument(
        "--chain", type=int, default=100_000,
        help="Length of the deep ring used for SCC (default: 100000)",
    )
    p.add_argument(
        "--edge-prob", type=float, default=0.02,
        help="Edge probability for the random graphs (default: 0.02)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _run_bench(args: argparse.Namespace) -> None:
    from digraph_lite.profiling.harness import run_benchmark
    from digraph_lite.profiling.report import format_report

    result = run_benchmark(
        dag_vertices=args.vertices,
        apsp_vertices=args.apsp_vertices,
        chain_vertices=args.chain,
        edge_prob=args.edge_prob,
        seed=args.seed,
        profile=args.cprofile,
    )
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="digraph-lite",
        description="Classical directed-graph algorithms -- pure Python.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_bench_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "bench":
        _run_bench(args)


if __name__ == "__main__":
    main()
