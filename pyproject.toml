[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpsarena"
version = "0.1.0"
description = "Terminal building blocks for a rock-paper-scissors arena: grid objects, ANSI colouring and a redraw-on-change frame renderer."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["game", "terminal", "ansi", "rock-paper-scissors", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rpsarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
