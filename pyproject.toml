[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "godsfun"
version = "0.1.0"
description = "Building blocks for a multi-player Game of Life where players seed creatures and compete for the field"
requires-python = ">=3.10"
keywords = ["game-of-life", "cellular-automaton", "game", "pygame", "simulation"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
godsfun = "godsfun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["godsfun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
