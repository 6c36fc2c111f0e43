[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mjbase"
version = "1.0.0"
description = "Base utilities for Mahjong game-playing programs: INI configuration, SGF game logs, an open-addressing hash table, sampling, timing and a line-based client socket."
requires-python = ">=3.10"
dependencies = []
keywords = ["mahjong", "ini", "sgf", "hash table", "reservoir sampling", "game ai"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mjbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
