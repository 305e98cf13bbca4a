[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oronsay"
version = "0.1.0"
description = "Batch sudoku solver for files of puzzles, with worker threads and a SHA-256 hash of the output"
requires-python = ">=3.10"
keywords = ["sudoku", "solver", "puzzle", "backtracking", "batch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oronsay = "oronsay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oronsay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
