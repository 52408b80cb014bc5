[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shiftkit"
version = "0.1.0"
description = "Context-free grammar data structures for LR-family parser generators"
requires-python = ">=3.10"
keywords = ["parser", "lalr", "lr", "compiler", "syntax", "grammar"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shiftkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
