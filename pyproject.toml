[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent"
version = "0.1.0"
description = "Puzzle solutions for the first six days of an advent puzzle calendar, with small grid, math and input-file helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent", "puzzles", "grid", "geometry", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-day01 = "advent.day01:main"
advent-day02 = "advent.day02:main"
advent-day03 = "advent.day03:main"
advent-day04 = "advent.day04:main"
advent-day05 = "advent.day05:main"
advent-day06 = "advent.day06:main"

[tool.hatch.build.targets.wheel]
packages = ["advent"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
