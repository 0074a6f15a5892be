[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgridgen"
version = "0.1.0"
description = "Word search puzzle generator that packs horizontal and vertical words into a compact grid"
requires-python = ">=3.10"
keywords = ["wordsearch", "puzzle", "generator", "optimization", "simulated-annealing"]
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
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
wordgridgen = "wordgridgen.cli:main"
wordgridgen-simple = "wordgridgen.simple:main"
wordgridgen-minimal = "wordgridgen.minimal:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgridgen"]

[tool.hatch.build.targets.sdist]
include = ["wordgridgen", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
