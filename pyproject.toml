[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hubwrap"
version = "0.1.0"
description = "Building blocks for a git wrapper: command-line parsing, argument rewriting, help lookup and a shell alias helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "github", "cli", "wrapper", "alias", "arguments"]
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
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hubwrap-alias = "hubwrap.alias:main"

[tool.setuptools.packages.find]
include = ["hubwrap*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
