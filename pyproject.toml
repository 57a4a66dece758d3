[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorlists"
version = "0.1.0"
description = "Lists with a cursor, plus the structures and tools built on them: queue, stack, big integers, perfect shuffles and a chained hash table."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "cursor",
    "queue",
    "stack",
    "big integer",
    "hash table",
    "perfect shuffle",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cursorlists-queue = "cursorlists.linkqueue:main"
cursorlists-stack = "cursorlists.linkstack:main"
cursorlists-shuffle = "cursorlists.shuffle:main"
cursorlists-arithmetic = "cursorlists.arithmetic:main"
cursorlists-hashtable = "cursorlists.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorlists"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
