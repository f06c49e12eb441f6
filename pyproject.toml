[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "belexpr"
version = "0.1.0"
description = "Expression values, exact rational numbers, operators and tokens for a small scripting language interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "expressions", "rational", "tokens", "scripting"]
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
packages = ["belexpr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
