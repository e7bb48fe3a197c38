[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minieval"
version = "0.1.0"
description = "A small tree-walking evaluator for a typed expression language with variables, blocks and loops"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "ast", "evaluator", "expression", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minieval = "minieval.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minieval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
