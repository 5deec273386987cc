[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckgame"
version = "0.1.0"
description = "Helper library for a tile-based puzzle game: character, string, memory, conversion, output, linked-list and printf-style formatting utilities."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "strings", "linked list", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["duckgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
