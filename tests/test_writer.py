import hashlib
import io
import queue

from oronsay.stats import ChunkStats, SolvedChunk
from oronsay.writer import Writer, spawn_writer


def _queue_of(*chunks):
    q = queue.Queue()
    for chunk in chunks:
        q.put(chunk)
    q.put(None)
    return q


def _chunk(chunk_id, data, puzzles=1):
    return SolvedChunk(id=chunk_id, data=data, stats=ChunkStats(chunks=1, puzzles=puzzles))


def test_process_writes_chunks_in_id_order():
    stream = io.BytesIO()
    writer = Writer(stream)
    writer.process(_queue_of(_chunk(2, b"c2"), _chunk(0, b"c0"), _chunk(1, b"c1")))
    assert stream.getvalue() == b"c0c1c2"
    assert writer.next_id == 3


def test_finish_hash_matches_written_bytes():
    writer = Writer(io.BytesIO())
    writer.process(_queue_of(_chunk(1, b"world"), _chunk(0, b"hello ")))
    digest, stats = writer.finish()
    assert digest == hashlib.sha256(b"hello world").hexdigest()
    assert stats.chunks == 2


def test_no_hash_gives_none():
    writer = Writer(no_hash=True)
    writer.process(_queue_of(_chunk(0, b"data")))
    digest, stats = writer.finish()
    assert digest is None
    assert stats.puzzles == 1


def test_stats_are_accumulated():
    writer = Writer()
    writer.append_chunk(_chunk(0, b"a", puzzles=2))
    writer.append_chunk(_chunk(1, b"b", puzzles=3))
    assert writer.stats.puzzles == 5
    assert writer.next_id == 2


def test_chunks_after_a_gap_are_held_back():
    stream = io.BytesIO()
    writer = Writer(stream)
    writer.process(_queue_of(_chunk(1, b"one"), _chunk(2, b"two")))
    assert stream.getvalue() == b""
    assert writer.stats.puzzles == 0
    assert writer.next_id == 0


def test_verbose_reports_each_chunk(capsys):
    writer = Writer(verbose=True)
    writer.process(_queue_of(_chunk(0, b"x", puzzles=2)))
    assert "Processed chunk ID: 0, 2" in capsys.readouterr().out


def test_spawn_writer_writes_file(tmp_path):
    target = tmp_path / "out.txt"
    q = _queue_of(_chunk(1, b"second\n"), _chunk(0, b"first\n"))
    digest, stats = spawn_writer(q, target, False, False).result(timeout=30)
    assert target.read_bytes() == b"first\nsecond\n"
    assert digest == hashlib.sha256(target.read_bytes()).hexdigest()
    assert stats.chunks == 2


def test_spawn_writer_without_file_still_hashes():
    q = _queue_of(_chunk(0, b"only"))
    digest, _ = spawn_writer(q, None, False, False).result(timeout=30)
    assert digest == hashlib.sha256(b"only").hexdigest()