[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dscollections"
version = "0.1.0"
description = "Classic data structures: dynamic array, open-addressing hash table, linked lists and an adjacency-list graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "hash table", "graph", "dynamic array"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dscollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
