[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic data structures and small algorithm exercises: lists, queues, stacks, trees, heaps, graphs and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "queue",
    "stack",
    "binary search tree",
    "priority queue",
    "graph",
    "bfs",
    "bubble sort",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-bfs = "labstructs.bfs:main"
labstructs-sorting = "labstructs.sorting:main"
labstructs-turnstile = "labstructs.turnstile:main"
labstructs-students = "labstructs.students:main"
labstructs-vowels = "labstructs.vowels:main"
labstructs-list-menu = "labstructs.menus:list_menu"
labstructs-item-list-menu = "labstructs.menus:item_list_menu"
labstructs-queue-menu = "labstructs.menus:queue_menu"
labstructs-stack-menu = "labstructs.menus:stack_menu"
labstructs-bst-menu = "labstructs.menus:bst_menu"
labstructs-priority-queue-menu = "labstructs.menus:priority_queue_menu"
labstructs-graph-menu = "labstructs.menus:graph_menu"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
