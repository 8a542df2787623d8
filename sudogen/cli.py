"""Command-line interface for the Sudoku generator."""

import argparse
import json
import logging
import sys

from .core.board import SudokuBoard
from .errors import SudokuError
from .generator import SudokuGenerator, Difficulty, DEFAULT_REMOVALS, DEFAULT_NODE_BUDGET
from .solvers import BacktrackingSolver, count_solutions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudogen",
        description="Sudoku solution and unique-puzzle generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles with 40 cells cleared
  sudogen generate --count 5 --removals 40

  # Generate a hard puzzle as JSON
  sudogen generate --difficulty hard --json

  # Check how many solutions a puzzle has (0, 1 or 2+)
  sudogen count --puzzle "530070000600195000..."

  # Measure generation across removal targets
  sudogen benchmark --targets 20 40 60 --puzzles 5 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    target = gen_parser.add_mutually_exclusive_group()
    target.add_argument(
        "--removals", "-r", type=int, default=None,
        help=f"Number of cells to clear (default: {DEFAULT_REMOVALS})"
    )
    target.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Difficulty level; draws the removal target from its range"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--solution", action="store_true",
        help="Also print the solution of each puzzle"
    )
    gen_parser.add_argument(
        "--json", action="store_true",
        help="Print puzzles as JSON instead of grids"
    )

    # Count command
    count_parser = subparsers.add_parser("count", help="Count solutions of a puzzle (0, 1 or 2+)")
    count_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--targets", "-t", type=int, nargs="+", default=None,
        help="Removal targets to benchmark (default: 20 40 50 60 81)"
    )
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=5,
        help="Puzzles per target (default: 5)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--node-budget", type=int, default=DEFAULT_NODE_BUDGET,
        help=f"Search nodes per uniqueness check (default: {DEFAULT_NODE_BUDGET})"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "count":
            cmd_count(args)
        elif args.command == "solve":
            cmd_solve(args)
        elif args.command == "benchmark":
            cmd_benchmark(args)
    except SudokuError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _parse_puzzle(text: str) -> SudokuBoard:
    try:
        return SudokuBoard.from_string(text)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    records = []

    for i in range(1, args.count + 1):
        if args.difficulty is not None:
            low, high = Difficulty(args.difficulty).removal_range
            removals = generator.rng.randint(low, high)
        elif args.removals is not None:
            removals = args.removals
        else:
            removals = DEFAULT_REMOVALS

        puzzle, solution = generator.generate_with_solution(removals)
        stats = generator.stats
        record = {
            "index": i,
            "puzzle": puzzle.to_string(),
            "clues": puzzle.count_filled(),
            "requested_removals": stats.requested_removals,
            "achieved_removals": stats.achieved_removals,
        }
        if args.solution:
            record["solution"] = solution.to_string()
        records.append(record)

        if not args.json:
            print(f"\n--- Puzzle {i} ({puzzle.count_filled()} clues, "
                  f"{stats.achieved_removals}/{stats.requested_removals} removals) ---")
            print(puzzle)
            if args.solution:
                print("Solution:")
                print(solution)

    if args.json:
        print(json.dumps(records, indent=2))


def cmd_count(args):
    """Handle the count command."""
    board = _parse_puzzle(args.puzzle)
    print(count_solutions(board))


def cmd_solve(args):
    """Handle the solve command."""
    board = _parse_puzzle(args.puzzle)

    print("Input puzzle:")
    print(board)
    print()

    solution, stats = BacktrackingSolver().solve(board)
    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        print(f"  Nodes: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
    else:
        print("✗ No solution")
        sys.exit(1)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark

    benchmark = GenerationBenchmark(
        removal_targets=args.targets,
        puzzles_per_target=args.puzzles,
        seed=args.seed,
        node_budget=args.node_budget,
    )

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Removal targets: {benchmark.removal_targets}")
    print(f"Puzzles per target: {args.puzzles}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Target:")
    print("-" * 50)
    for target, stats in summary["results_by_target"].items():
        print(f"\n{target} removals:")
        print(f"  Achieved: avg {stats['avg_achieved']:.1f}, "
              f"min {stats['min_achieved']}, max {stats['max_achieved']}")
        print(f"  Saturated: {stats['saturation_rate']:.1f}%")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        for chart in charts:
            print(f"  - {chart}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
