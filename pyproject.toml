[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Small command-line tools: a bitcoin value calculator, an RPN evaluator and a merge-sort timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "merge-sort", "exchange-rate", "cli"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "ninetools.exchange:main"
RPN = "ninetools.rpn:main"
PmergeMe = "ninetools.pmerge:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
addopts = "-ra"
