[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rterm"
version = "0.1.0"
description = "A small full-screen console shell that runs commands with bash and keeps a scrollable history"
requires-python = ">=3.10"
keywords = ["terminal", "shell", "console", "bash", "history"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rterm = "rterm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
