from oronsay.stats import ChunkStats, PuzzleChunk, SolvedChunk


def test_default_stats_are_zero():
    stats = ChunkStats()
    assert (stats.chunks, stats.puzzles, stats.solutions) == (0, 0, 0)
    assert (stats.no_guesses, stats.guesses, stats.elapsed) == (0, 0, 0.0)


def test_add_accumulates_every_field():
    total = ChunkStats(chunks=1, puzzles=2, solutions=3, no_guesses=4, guesses=5, elapsed=0.5)
    other = ChunkStats(chunks=1, puzzles=2, solutions=3, no_guesses=4, guesses=5, elapsed=0.25)
    total.add(other)
    assert total == ChunkStats(
        chunks=2, puzzles=4, solutions=6, no_guesses=8, guesses=10, elapsed=0.75
    )


def test_add_leaves_other_untouched():
    total = ChunkStats()
    other = ChunkStats(puzzles=7, guesses=3)
    total.add(other)
    total.add(other)
    assert other == ChunkStats(puzzles=7, guesses=3)
    assert total.puzzles == 2 * other.puzzles
    assert total.guesses == 2 * other.guesses


def test_add_with_empty_is_identity():
    stats = ChunkStats(chunks=3, puzzles=9)
    stats.add(ChunkStats())
    assert stats == ChunkStats(chunks=3, puzzles=9)


def test_puzzle_chunk_data_is_slice():
    buffer = b"header\nline1\nline2\n"
    chunk = PuzzleChunk(id=0, start=7, end=13, buffer=buffer)
    assert bytes(chunk.data()) == buffer[7:13]


def test_puzzle_chunk_data_clamped_to_buffer():
    buffer = b"abcdef"
    chunk = PuzzleChunk(id=2, start=4, end=100, buffer=buffer)
    assert bytes(chunk.data()) == b"ef"


def test_solved_chunks_get_independent_stats():
    first = SolvedChunk(id=0, data=b"x")
    second = SolvedChunk(id=1, data=b"y")
    first.stats.puzzles += 1
    assert second.stats == ChunkStats()
    assert first.stats.puzzles == 1