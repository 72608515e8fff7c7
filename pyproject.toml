[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algo"
version = "0.1.0"
description = "Small data structures and helpers for algorithm practice: heaps, linked lists, queues, stacks and list and tree nodes."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "heap", "linked-list", "queue", "stack", "binary-tree"]
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

[tool.hatch.build.targets.wheel]
packages = ["algo"]

[tool.pytest.ini_options]
addopts = "-ra"
