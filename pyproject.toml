[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Classic data-structure and algorithm drills: bounded stacks, queues, deques, sorting, recursion and small object models."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "stack",
    "queue",
    "deque",
    "sorting",
    "recursion",
    "education",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-stack = "dsdrills.menus:stack_main"
dsdrills-shared-stack = "dsdrills.menus:shared_stack_main"
dsdrills-queue = "dsdrills.menus:queue_main"
dsdrills-array-queue = "dsdrills.menus:array_queue_main"
dsdrills-deque = "dsdrills.menus:deque_main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
