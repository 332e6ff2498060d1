[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hordeshooter"
version = "0.1.0"
description = "Game-state simulation for a top-down horde shooter: player, guns, bullets, enemies, menus and a fixed-rate game loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "simulation", "arcade", "game-loop"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["hordeshooter*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
