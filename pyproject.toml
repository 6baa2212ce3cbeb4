[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calgcollections"
version = "1.0.0"
description = "Classic collection types: a chained hash set, a singly linked list and a byte-keyed trie."
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "hash set", "linked list", "trie", "data structures"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
packages = ["calgcollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
