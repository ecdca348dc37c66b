[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odatrek"
version = "0.1.0"
description = "A small pygame window that clears to a cycling rainbow colour, with a file logger that stows its log as an xz archive."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "logging", "xz", "okhsv", "rainbow"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
odatrek = "odatrek.game:main"

[tool.hatch.build.targets.wheel]
packages = ["odatrek"]

[tool.pytest.ini_options]
addopts = "-ra"
