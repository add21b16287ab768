[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starlight-console"
version = "0.1.0"
description = "Building blocks for a story-driven terminal console game: a typed line-oriented save format, account login, logging and device discovery."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "text-adventure", "role-playing", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starlight"]

[tool.hatch.build.targets.sdist]
include = ["starlight", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
