[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicc"
version = "0.1.0"
description = "Lexical scanner and recursive-descent syntax checker for a small C subset"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "scanner", "parser", "recursive-descent", "c"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicc = "minicc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minicc"]

[tool.pytest.ini_options]
addopts = "-ra"
