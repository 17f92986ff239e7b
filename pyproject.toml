[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aclib"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: prefix sums, number theory, sorting, knapsack and graph search."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "number-theory",
    "graph",
    "knapsack",
    "dijkstra",
    "sieve",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aclib"]

[tool.pytest.ini_options]
addopts = "-ra"
