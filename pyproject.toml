[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thuvien"
version = "0.1.0"
description = "A small library catalogue manager: load, edit, search, lend and save a list of books from the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalogue", "lending", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thuvien = "thuvien.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["thuvien"]

[tool.pytest.ini_options]
addopts = "-ra"
