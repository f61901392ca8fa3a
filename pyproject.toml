[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zdkit"
version = "0.1.0"
description = "Small containers, wildcard matching, coloured logging, command-line parsing and terminal printing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "wildcard",
    "command-line",
    "hash-table",
    "trie",
    "queue",
    "stack",
    "linked-list",
    "logging",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zdkit"]

[tool.hatch.build.targets.sdist]
include = ["zdkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
