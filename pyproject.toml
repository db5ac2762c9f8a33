[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsa-drills"
version = "1.0.0"
description = "Classic data-structure and algorithm interview problems, solved in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "interview",
    "linked list",
    "binary tree",
    "dynamic programming",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsa_drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
