[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdforge"
version = "0.1.0"
description = "Building blocks for Markdown parsers: rule ordering, source maps, text utilities and link parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "parser", "sourcemap", "plugins"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
