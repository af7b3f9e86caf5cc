[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsondom"
version = "0.1.0"
description = "A small JSON library with an event-driven incremental parser and a document model that keeps numbers in their textual form"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "dom", "sax", "parser", "serialization"]
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
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsondom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
