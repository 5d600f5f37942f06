[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babylon"
version = "0.1.1"
description = "A small game engine skeleton: window loop, logger, user paths, typed config values and monitor discovery"
requires-python = ">=3.10"
keywords = ["game", "engine", "pygame", "logger"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
babylon = "babylon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["babylon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
