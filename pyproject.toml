[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Small classic data structures and algorithms: bounded stack, queues, deque, linked list, infix calculator and recursion helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "stack",
    "queue",
    "deque",
    "linked-list",
    "postfix",
    "calculator",
    "recursion",
    "hanoi",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-stack = "structkit.stack:main"
structkit-calc = "structkit.calculator:main"
structkit-recursion = "structkit.recursion:main"
structkit-queues = "structkit.queues:main"
structkit-linked-list = "structkit.linked_list:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.hatch.build.targets.sdist]
include = ["structkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
