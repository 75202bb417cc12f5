[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "garfield"
version = "0.2.0"
description = "Knowledge-graph data types, community detection and hyperedge detection for source code graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "knowledge-graph",
    "call-graph",
    "static-analysis",
    "community-detection",
    "hyperedges",
    "source-code",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["garfield"]

[tool.hatch.build.targets.sdist]
include = ["garfield", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
