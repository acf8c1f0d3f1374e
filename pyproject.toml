[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structdiff"
version = "0.7.3"
description = "Compute and apply partial diffs between map-like collections, with chunked sequence containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "delta-compression", "difference", "patch", "multiset", "rope"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["structdiff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
