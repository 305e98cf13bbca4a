"""Command line: solve a file of sudoku puzzles with several threads."""

from __future__ import annotations

import argparse
import os
import queue
import sys
import time
from pathlib import Path

from .reader import spawn_reader
from .solver import SolverBasic
from .stats import ChunkStats, PuzzleChunk, SolvedChunk
from .worker import spawn_workers
from .writer import spawn_writer

_U32_MAX = 2**32 - 1


def get_num_threads() -> int:
    """Number of CPUs available, at least one."""
    return os.cpu_count() or 1


def _to_nanos(seconds: float) -> int:
    return max(0, round(seconds * 1_000_000_000))


def _format_duration(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        return f"{nanos / 1_000_000_000:.2f}s"
    if nanos >= 1_000_000:
        return f"{nanos / 1_000_000:.2f}ms"
    if nanos >= 1_000:
        return f"{nanos / 1_000:.2f}µs"
    return f"{nanos:.2f}ns"


def _rate(count: int, seconds: float) -> int:
    if seconds <= 0:
        return _U32_MAX
    return min(int(count / seconds), _U32_MAX)


def format_stats(
    stats: ChunkStats, hash_hex: str | None, elapsed: float, num_threads: int
) -> str:
    """Render the run summary; elapsed and stats.elapsed are in seconds."""
    if stats.puzzles == 0:
        raise ValueError("no puzzles were processed")

    real_nanos = _to_nanos(elapsed)
    solver_nanos = _to_nanos(stats.elapsed)
    guess_rate = stats.guesses / stats.puzzles
    no_guess_percent = stats.no_guesses / stats.puzzles * 100.0

    lines = [
        f"   # Puzzles: {stats.puzzles:,}, No Guesses: {no_guess_percent:.2f}%, "
        f"Avg Guesses: {guess_rate:.2f}",
        f"   Real Time: {_format_duration(real_nanos)}, "
        f"Rate: {_rate(stats.puzzles, elapsed):,}/s, "
        f"Avg: {_format_duration(real_nanos // stats.puzzles)}, "
        f"# Chunks: {stats.chunks:,}",
        f" Solver Time: {_format_duration(solver_nanos)}, "
        f"Rate: {_rate(stats.puzzles, stats.elapsed):,}/s, "
        f"Avg: {_format_duration(solver_nanos // stats.puzzles)}, "
        f"# Threads: {num_threads}",
        f"SHA-256 Hash: {hash_hex if hash_hex is not None else 'Not computed'}",
    ]
    return "\n".join(lines)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="oronsay", description="Solve a file of sudoku puzzles, one per line."
    )
    parser.add_argument("-i", "--infile", type=Path, required=True, help="Input file")
    parser.add_argument("-o", "--outfile", type=Path, help="Output file")
    parser.add_argument(
        "-t", "--threads", dest="num_threads", type=_positive_int,
        help="Number of worker threads",
    )
    parser.add_argument(
        "-c", "--chunk-size", type=_positive_int, default=16, help="Chunk size in kB"
    )
    parser.add_argument("-n", "--no-hash", action="store_true", help="No hash")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the solver pipeline and print a summary; return the exit status."""
    args = _parse_args(argv)
    num_workers = args.num_threads if args.num_threads is not None else get_num_threads()

    try:
        data = args.infile.read_bytes()
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    chunk_queue: queue.Queue[PuzzleChunk | None] = queue.Queue()
    output_queue: queue.Queue[SolvedChunk | None] = queue.Queue()
    started = time.perf_counter()
    solver = SolverBasic(limit=1, min_heuristic=True)

    try:
        line_length, reader = spawn_reader(
            data, chunk_queue, output_queue, args.chunk_size * 1024
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    workers = spawn_workers(solver, line_length, chunk_queue, output_queue, num_workers)
    writer = spawn_writer(output_queue, args.outfile, args.no_hash, args.verbose)

    try:
        reader.result()
        for worker in workers:
            worker.result()
    finally:
        output_queue.put(None)
    hash_hex, stats = writer.result()

    print(format_stats(stats, hash_hex, time.perf_counter() - started, num_workers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())