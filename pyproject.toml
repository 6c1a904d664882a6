[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aspen"
version = "0.1.0"
description = "Composable reactors for reactive programming: cells, queues, groups, gates and an executor."
requires-python = ">=3.10"
dependencies = []
keywords = ["reactive", "reactor", "streams", "dataflow", "events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["aspen"]

[tool.pytest.ini_options]
addopts = "-ra"
