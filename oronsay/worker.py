"""Workers that solve every puzzle line in a chunk."""

from __future__ import annotations

import queue
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from .solver import Solver
from .stats import ChunkStats, PuzzleChunk, SolvedChunk
from .sudoku import N_CELLS, Puzzle, Sudoku


class UnsolvedPuzzleError(RuntimeError):
    """A puzzle in a chunk has no solution."""

    def __init__(self, index: int, sudoku: Sudoku) -> None:
        self.index = index
        self.sudoku = sudoku
        super().__init__(f"Failed to solve sudoku {index}: {sudoku}\n{sudoku.pretty()}")


@dataclass(frozen=True)
class Worker:
    """Solves chunks of fixed-length lines with one solver."""

    solver: Solver
    line_length: int

    def process_chunk(self, chunk: PuzzleChunk, state: Any) -> SolvedChunk:
        """Solve each whole line of the chunk into 'puzzle,solution' lines."""
        started = time.perf_counter()
        data = chunk.data()
        stats = ChunkStats()
        out = bytearray()

        whole = len(data) - len(data) % self.line_length
        for offset in range(0, whole, self.line_length):
            grid = data[offset : offset + N_CELLS]
            puzzle = Puzzle(grid)
            stats.puzzles += 1

            out += grid
            out += b","

            solution = self.solver.solve(puzzle, state)
            if solution is None:
                raise UnsolvedPuzzleError(stats.puzzles, puzzle.sudoku())

            out += solution.sudoku.grid
            out += b"\n"

            stats.guesses += solution.guesses
            if solution.guesses == 0:
                stats.no_guesses += 1

        stats.chunks += 1
        stats.elapsed = time.perf_counter() - started
        return SolvedChunk(id=chunk.id, data=bytes(out), stats=stats)

    def run(
        self,
        chunk_queue: queue.Queue[PuzzleChunk | None],
        output_queue: queue.Queue[SolvedChunk | None],
    ) -> None:
        """Solve chunks until None arrives, then pass None on to other workers."""
        state = self.solver.make_state()
        for chunk in iter(chunk_queue.get, None):
            output_queue.put(self.process_chunk(chunk, state))
        chunk_queue.put(None)


def spawn_worker(
    solver: Solver,
    line_length: int,
    chunk_queue: queue.Queue[PuzzleChunk | None],
    output_queue: queue.Queue[SolvedChunk | None],
) -> Future[None]:
    """Run one worker in its own thread."""
    return spawn_workers(solver, line_length, chunk_queue, output_queue, 1)[0]


def spawn_workers(
    solver: Solver,
    line_length: int,
    chunk_queue: queue.Queue[PuzzleChunk | None],
    output_queue: queue.Queue[SolvedChunk | None],
    num_workers: int,
) -> list[Future[None]]:
    """Run num_workers workers, each in its own thread, sharing the queues."""
    if num_workers < 1:
        raise ValueError("at least one worker is needed")
    worker = Worker(solver=solver, line_length=line_length)
    executor = ThreadPoolExecutor(max_workers=num_workers, thread_name_prefix="worker")
    futures = [
        executor.submit(worker.run, chunk_queue, output_queue)
        for _ in range(num_workers)
    ]
    executor.shutdown(wait=False)
    return futures