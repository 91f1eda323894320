[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evenements"
version = "0.1.0"
description = "Keep a register of events in SQLite, search it by field and budget, and ask a simple keyword assistant about an event."
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "scheduling", "sqlite", "register", "search", "chatbot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evenements = "evenements.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["evenements"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
