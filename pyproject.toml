[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omplab"
version = "0.1.0"
description = "Breadth-first and depth-first graph traversal, bubble, odd-even and merge sorts, and sum/min/max/average summaries, with a small command-line front end."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bfs",
    "dfs",
    "graph traversal",
    "bubble sort",
    "odd-even transposition sort",
    "merge sort",
    "statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
omplab = "omplab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["omplab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
