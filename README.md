# oronsay

A batch sudoku solver. It reads a file of puzzles, one per line, solves
each one with a depth-first search over candidate bitmasks that tries the
most constrained cell first, and writes every puzzle next to its solution.
A SHA-256 hash of the output is computed so that results can be compared
between runs.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Input format

Each puzzle line starts with 81 characters, read row by row. The digits
`1`–`9` are clues; any other character is an empty cell. All puzzle lines
must have the same length, newline included, and the input must hold at
least two lines.

If the first line has a different length from the puzzle lines, it is
treated as a header: it is copied to the output unchanged, ending in
`\n` (a trailing `\r` is dropped).

Each output line is the first 81 characters of the puzzle line, a comma,
and the solution:

```
<puzzle>,<solution>
```

## Command line

```
oronsay --infile puzzles.txt --outfile solved.txt
```

The same command can be started with `python -m oronsay.cli`.

Options:

- `-i`, `--infile PATH` — input file (required)
- `-o`, `--outfile PATH` — output file; if omitted, nothing is written but
  the summary and the hash are still reported
- `-t`, `--threads N` — number of worker threads, at least 1 (default: the
  number of CPUs)
- `-c`, `--chunk-size KB` — size of the work chunks in kilobytes, at least
  1 (default: 16); it is rounded down to a whole number of lines
- `-n`, `--no-hash` — skip computing the SHA-256 hash
- `-v`, `--verbose` — print `Processed chunk ID: <id>, <puzzles so far>`
  as each chunk is written

When it finishes, the command prints the number of puzzles, the share
solved without guessing, the average number of guesses, the wall-clock and
summed solver times with rates and per-puzzle averages, the number of
chunks and threads, and the SHA-256 hash of the output (or
`Not computed`).

If the input file cannot be read, or its layout is not one of
newline-terminated lines, an error is printed and the exit status is 1.
A puzzle without a solution stops the run with an `UnsolvedPuzzleError`
naming the puzzle and drawing its grid.

## Library use

```python
from oronsay.solver import SolverBasic
from oronsay.sudoku import Puzzle

solver = SolverBasic(limit=1, min_heuristic=True)
state = solver.make_state()
puzzle = Puzzle(b"..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3..")
info = solver.solve(puzzle, state)
print(info.sudoku.pretty())
print("guesses:", info.guesses)
```

`solve` returns `None` when the puzzle has no solution or its clues
conflict. A state from `make_state` can be reused for many puzzles.

Other pieces:

- `oronsay.sudoku` — `Puzzle` and `Sudoku`, with `clean()`, `pretty()`
  and `str()` of a grid.
- `oronsay.reader` — `analyze_buffer` finds the line length and header;
  `spawn_reader` queues chunks of whole lines from a buffer.
- `oronsay.worker` — `Worker.process_chunk` solves one chunk;
  `spawn_workers` runs workers in threads sharing the queues.
- `oronsay.writer` — `Writer` puts chunks back in order, writes them and
  hashes them; `spawn_writer` runs it in a thread.
- `oronsay.stats` — `ChunkStats`, `PuzzleChunk` and `SolvedChunk`.

## Limits

The input file is read into memory in full before solving starts. Only
the basic backtracking solver is provided, and it stops at the first
solution; it does not report whether a puzzle has more than one.