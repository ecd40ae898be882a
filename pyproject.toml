[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "closion"
version = "0.1.0"
description = "A small arithmetic expression compiler front end: lexer, parser, syntax tree printer and evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "ast", "visitor", "arithmetic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
closion = "closion.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["closion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
