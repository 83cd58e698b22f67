[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicds"
version = "0.1.0"
description = "Classic data structures and small value types: dates, fractions, vectors, linked lists, hash tables, red-black trees, stacks and queues."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "red-black-tree",
    "hash-table",
    "linked-list",
    "priority-queue",
    "date",
    "fraction",
    "calculator",
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
classicds-calc = "classicds.calculator:main"
classicds-digits = "classicds.digits:main"

[tool.hatch.build.targets.wheel]
packages = ["classicds"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["classicds"]
