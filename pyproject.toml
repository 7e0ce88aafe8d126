[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbom"
version = "0.1.0"
description = "A small document store kept in JSON files, with an interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["nosql", "document-store", "json", "database", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dbom = "dbom.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["dbom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
