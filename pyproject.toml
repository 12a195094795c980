[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prique"
version = "0.1.0"
description = "Max-priority queues built on a binary heap or a sorted doubly linked list, with the containers underneath"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "linked list", "dynamic array", "data structures"]
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
prique-demo = "prique.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["prique"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
