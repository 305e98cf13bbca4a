"""Split a buffer of fixed-length puzzle lines into chunks of work."""

from __future__ import annotations

import queue
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Union

from .stats import ChunkStats, PuzzleChunk, SolvedChunk

Buffer = Union[bytes, bytearray]

_CR = ord("\r")


class LayoutError(ValueError):
    """The input does not look like a file of newline-terminated lines."""


@dataclass(frozen=True)
class ReaderMetadata:
    """Length of one puzzle line, the optional header and where data begins."""

    line_length: int
    header_text: bytes | None
    data_start: int


def find_line_bounds(buffer: Buffer) -> tuple[int, int]:
    """Return the offsets of the first two newlines in the buffer."""
    first = buffer.find(b"\n")
    if first < 0:
        raise LayoutError("input holds no newline")
    second = buffer.find(b"\n", first + 1)
    if second < 0:
        raise LayoutError("input holds fewer than two lines")
    return first, second


def analyze_buffer(buffer: Buffer) -> ReaderMetadata:
    """Work out the line length and split off a header line if there is one."""
    first, second = find_line_bounds(buffer)
    line_length = second - first

    if first > 0 and buffer[first - 1] == _CR:
        pre_fix, post_fix = first - 2, first + 2
    else:
        pre_fix, post_fix = first - 1, first + 1

    if pre_fix < 0:
        raise LayoutError("input starts with an empty line")

    if post_fix != line_length:
        header = bytes(buffer[: pre_fix + 1]) + b"\n"
        return ReaderMetadata(line_length, header, post_fix)
    return ReaderMetadata(line_length, None, 0)


def _run_in_thread(task: Callable[[], None]) -> Future[None]:
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="reader")
    future = executor.submit(task)
    executor.shutdown(wait=False)
    return future


def spawn_reader(
    data: Buffer,
    chunk_queue: queue.Queue[PuzzleChunk | None],
    output_queue: queue.Queue[SolvedChunk | None],
    chunk_size: int,
) -> tuple[int, Future[None]]:
    """Start queueing chunks of whole lines; return the line length and the task.

    A header line, if present, goes straight to the output queue as chunk 0.
    When every chunk is queued, None is put on the chunk queue.
    """
    metadata = analyze_buffer(data)
    line_length = metadata.line_length
    chunk_size -= chunk_size % line_length
    if chunk_size <= 0:
        raise ValueError(
            f"chunk size must hold at least one line of {line_length} bytes"
        )

    first_id = 0
    if metadata.header_text is not None:
        output_queue.put(SolvedChunk(id=0, data=metadata.header_text, stats=ChunkStats()))
        first_id = 1

    size = len(data)

    def read() -> None:
        try:
            starts = range(metadata.data_start, size, chunk_size)
            for chunk_id, start in enumerate(starts, start=first_id):
                end = min(start + chunk_size, size)
                chunk_queue.put(PuzzleChunk(id=chunk_id, start=start, end=end, buffer=data))
        finally:
            chunk_queue.put(None)

    return line_length, _run_in_thread(read)