[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memsearch"
version = "0.1.0"
description = "An in-memory inverted index and interactive search shell for directory trees of ASCII text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted-index", "hashtable", "linked-list", "text-indexing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchshell = "memsearch.searchshell:main"

[tool.hatch.build.targets.wheel]
packages = ["memsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
