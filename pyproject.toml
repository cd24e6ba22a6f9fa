[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstmap"
version = "0.1.0"
description = "An ordered map on an unbalanced binary search tree with a user-supplied ordering and a cursor for in-order traversal."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "ordered map", "treemap", "upper bound", "data structures"]
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
bstmap-demo = "bstmap.demo:main"
bstmap-grade = "bstmap.grader:main"

[tool.hatch.build.targets.wheel]
packages = ["bstmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
