[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostchase"
version = "0.1.0"
description = "Game AI building blocks for a grid-based ghost-chase game: vector and matrix maths, steering behaviours, Dijkstra pathfinding, decision trees and state machines"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-ai",
    "steering",
    "pathfinding",
    "dijkstra",
    "state-machine",
    "decision-tree",
    "particles",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ghostchase"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
