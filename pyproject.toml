[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem_equity"
version = "0.1.0"
description = "Texas hold'em hand scoring and exhaustive or Monte Carlo equity estimation"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "holdem", "equity", "hand-evaluator", "cards"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holdem-equity = "holdem_equity.equity:main"

[tool.hatch.build.targets.wheel]
packages = ["holdem_equity"]

[tool.pytest.ini_options]
addopts = "-ra"
