[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodechain"
version = "0.1.0"
description = "Singly linked list and stack algorithms: sorting, merging, searching and binary conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "data structures", "algorithms", "bubble sort", "merge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
nodechain = "nodechain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nodechain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
