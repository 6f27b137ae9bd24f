[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conslisp"
version = "0.1.0"
description = "S-expressions, a reader and function objects for a small McCarthy-style Lisp"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "s-expression", "parser", "reader", "cons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["conslisp"]

[tool.pytest.ini_options]
addopts = "-ra"
