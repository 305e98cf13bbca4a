"""Collect solved chunks in order, write them out and hash them."""

from __future__ import annotations

import contextlib
import hashlib
import queue
from concurrent.futures import Future, ThreadPoolExecutor
from os import PathLike
from typing import BinaryIO, Union

from .stats import ChunkStats, SolvedChunk

StrPath = Union[str, "PathLike[str]"]


class Writer:
    """Appends chunks in id order to an optional stream and a SHA-256 hash."""

    def __init__(
        self,
        stream: BinaryIO | None = None,
        *,
        no_hash: bool = False,
        verbose: bool = False,
    ) -> None:
        self.stream = stream
        self.no_hash = no_hash
        self.verbose = verbose
        self.stats = ChunkStats()
        self.next_id = 0
        self._hasher = hashlib.sha256()
        self._pending: dict[int, SolvedChunk] = {}

    def append_chunk(self, chunk: SolvedChunk) -> None:
        """Write one chunk and count it, assuming it is the next in order."""
        self.stats.add(chunk.stats)
        if self.verbose:
            print(f"Processed chunk ID: {chunk.id}, {self.stats.puzzles}")
        if self.stream is not None:
            self.stream.write(chunk.data)
        if not self.no_hash:
            self._hasher.update(chunk.data)
        self.next_id += 1

    def process(self, output_queue: queue.Queue[SolvedChunk | None]) -> None:
        """Consume chunks until None arrives, holding back those out of order."""
        for chunk in iter(output_queue.get, None):
            if chunk.id != self.next_id:
                self._pending[chunk.id] = chunk
                continue
            self.append_chunk(chunk)
            while self.next_id in self._pending:
                self.append_chunk(self._pending.pop(self.next_id))
        if self.stream is not None:
            self.stream.flush()

    def finish(self) -> tuple[str | None, ChunkStats]:
        """Return the hex digest (None when hashing is off) and the totals."""
        digest = None if self.no_hash else self._hasher.hexdigest()
        return digest, self.stats


def spawn_writer(
    output_queue: queue.Queue[SolvedChunk | None],
    outfile: StrPath | None,
    no_hash: bool,
    verbose: bool,
) -> Future[tuple[str | None, ChunkStats]]:
    """Run a writer in its own thread; the future yields the hash and totals."""

    def write() -> tuple[str | None, ChunkStats]:
        with contextlib.ExitStack() as stack:
            stream = stack.enter_context(open(outfile, "wb")) if outfile is not None else None
            writer = Writer(stream, no_hash=no_hash, verbose=verbose)
            writer.process(output_queue)
        return writer.finish()

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="writer")
    future = executor.submit(write)
    executor.shutdown(wait=False)
    return future