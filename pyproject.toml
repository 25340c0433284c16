[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prepatory"
version = "0.1.0"
description = "Classic data structures and interview-style algorithms: linked lists, deques, persistent stacks, binary search trees, and string, array and number routines."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "linked-list",
    "deque",
    "binary-search-tree",
    "sliding-window",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prepatory-cache = "prepatory.cache:main"

[tool.hatch.build.targets.wheel]
packages = ["prepatory"]

[tool.hatch.build.targets.sdist]
include = ["prepatory", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
