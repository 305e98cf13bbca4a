"""Units of work passed between the reader, workers and writer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ChunkStats:
    """Counters for processed chunks; elapsed is in seconds."""

    chunks: int = 0
    puzzles: int = 0
    solutions: int = 0
    no_guesses: int = 0
    guesses: int = 0
    elapsed: float = 0.0

    def add(self, other: ChunkStats) -> None:
        """Accumulate another set of counters into this one."""
        self.chunks += other.chunks
        self.puzzles += other.puzzles
        self.solutions += other.solutions
        self.no_guesses += other.no_guesses
        self.guesses += other.guesses
        self.elapsed += other.elapsed


@dataclass(frozen=True)
class PuzzleChunk:
    """A byte range of puzzle lines inside a shared buffer."""

    id: int
    start: int
    end: int
    buffer: bytes | bytearray | memoryview

    def data(self) -> memoryview:
        """Return the chunk's bytes without copying."""
        return memoryview(self.buffer)[self.start : self.end]


@dataclass
class SolvedChunk:
    """Output bytes for one chunk, ordered by id."""

    id: int
    data: bytes
    stats: ChunkStats = field(default_factory=ChunkStats)