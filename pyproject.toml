[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringplus"
version = "0.1.0"
description = "Trim a chosen set of characters from both ends of a string"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "trim", "strip", "text"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stringplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
