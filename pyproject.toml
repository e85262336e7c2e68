[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdestl"
version = "0.1.0"
description = "Classic containers and algorithms: open-addressing hash map, red-black tree map and set, vector, stack, sorted vector, singly linked list and sorting routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "hash map", "red-black tree", "sorting", "radix sort", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdestl"]

[tool.pytest.ini_options]
addopts = "-ra"
