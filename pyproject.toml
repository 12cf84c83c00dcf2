[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slimemaze"
version = "2025.0"
description = "A tile-based maze game with hidden traps, pressure plates and a locked exit door"
requires-python = ">=3.10"
keywords = ["game", "maze", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slimemaze = "slimemaze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["slimemaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
